# inventory_tracker/domain/enums.py
import enum


class ProductCategory(str, enum.Enum):
    pc = "pc"
    vest = "vest"


class ProductStatus(str, enum.Enum):
    in_stock = "in_stock"
    out_of_stock = "out_of_stock"


class MovementType(str, enum.Enum):
    inbound = "inbound"
    outbound = "outbound"
