"""
Capability interface between the autofill core and a browser driver.

Nothing here imports a browser library, so the runner and completers load
without one installed.
"""

from pathlib import Path
from typing import Any, List, Optional, Protocol


class BrowserSession(Protocol):
    """Minimal set of driver operations the runner needs."""

    def elements(self, selector: str) -> List[Any]: ...

    def child_elements(self, element: Any, selector: str) -> List[Any]: ...

    def get_attribute(self, element: Any, name: str) -> Optional[str]: ...

    def is_checked(self, element: Any) -> bool: ...

    def clear(self, element: Any) -> None: ...

    def set_value(self, element: Any, value: str) -> None: ...

    def click(self, element: Any) -> None: ...

    def upload_file(self, path: str) -> str: ...

    def select_by_index(self, element: Any, index: int) -> None: ...

    def select_by_value(self, element: Any, value: Any) -> None: ...

    def save_screenshot(self, path: Path) -> None: ...

    def current_url(self) -> str: ...

    def get_text(self, selector: str) -> str: ...
