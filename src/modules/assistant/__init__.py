"""AI drafting assistant (notification texts, diagnosis hints, portal answers)."""
