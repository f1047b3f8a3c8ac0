"""Client portal: order status lookup for customers."""
