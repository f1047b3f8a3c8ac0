import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    """Pre-filters applied on the database before the column table runs.

    ``customer`` narrows the list to one customer's orders (exact id),
    as opened from the customer list.
    """

    customer = django_filters.CharFilter(field_name="customer_id", lookup_expr="exact")

    class Meta:
        model = Order
        fields = ["customer"]
