from mist_api.adapters.inventory.inventory import (
    assign,
    claim,
    delete,
    inventory_path,
    list_inventory,
    unassign,
)
from mist_api.adapters.inventory.models import (
    ClaimResult,
    Inventory,
    InventoryOp,
    InventoryOpResult,
    InventoryUpdate,
)

__all__ = [
    "ClaimResult",
    "Inventory",
    "InventoryOp",
    "InventoryOpResult",
    "InventoryUpdate",
    "assign",
    "claim",
    "delete",
    "inventory_path",
    "list_inventory",
    "unassign",
]
