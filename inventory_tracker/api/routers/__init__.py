from . import dashboard
from . import inventory
from . import movements
from . import pc_models
from . import staff

__all__ = [
    "dashboard",
    "inventory",
    "movements",
    "pc_models",
    "staff",
]
