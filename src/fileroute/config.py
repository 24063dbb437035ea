"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Route-table build configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(filter=lambda p: "drafts" not in p.parts)
    """

    # Called with each candidate file before it is loaded; False drops it
    filter: Callable[[Path], bool] | None = None

    # Handler unit extension, stripped from the derived template
    suffix: str = ".py"

    # Skip "_"-prefixed files and directories
    skip_private: bool = True

    # Module attribute holding the handling logic
    handler_name: str = "handler"
