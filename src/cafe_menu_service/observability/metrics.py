"""Custom metrics for the café menu service."""

from opentelemetry import metrics

# Get meter for menu service
meter = metrics.get_meter("menu-svc")

# Successful store operations by kind
menu_item_operations_counter = meter.create_counter(
    name="menu_item_operations_total",
    description="Total number of successful menu item operations by operation",
    unit="1",
)

menu_item_not_found_counter = meter.create_counter(
    name="menu_item_not_found_total",
    description="Total number of operations that referenced a missing menu item",
    unit="1",
)

# Current number of stored items
menu_items_stored = meter.create_up_down_counter(
    name="menu_items_stored",
    description="Current number of menu items held in memory",
    unit="1",
)


def record_menu_item_operation(operation: str) -> None:
    """Record a successful menu item operation.

    Args:
        operation: The operation performed (e.g., "create", "update", "delete")
    """
    menu_item_operations_counter.add(1, {"operation": operation})


def record_menu_item_not_found(operation: str) -> None:
    """Record an operation that referenced a missing menu item.

    Args:
        operation: The operation that missed
    """
    menu_item_not_found_counter.add(1, {"operation": operation})


def record_stored_items_change(change: int) -> None:
    """Record a change in the number of stored menu items.

    Args:
        change: Change in item count (positive for additions, negative for removals)
    """
    menu_items_stored.add(change)
