from ._config import UnderbarConfig, get_config, reset_config, set_config
from ._depreciation import renamed
from ._format import value_repr
from ._main import CommonBase, Pipeable
from ._scheduler import Scheduler

__all__ = [
    "CommonBase",
    "Pipeable",
    "Scheduler",
    "UnderbarConfig",
    "get_config",
    "renamed",
    "reset_config",
    "set_config",
    "value_repr",
]
