"""reactcell: a minimal reactive value with change listeners."""

from importlib.metadata import version as _version

__version__ = _version("reactcell")

from reactcell._errors import ReactCellError, InvalidListenerError
from reactcell._types import Listener, TypeTag
from reactcell.cell import ReactiveCell
from reactcell.subscription import Subscription
# textual bridge is opt-in, not imported here

__all__ = [
    "ReactiveCell",
    "Subscription",
    "TypeTag",
    "Listener",
    "ReactCellError",
    "InvalidListenerError",
]
