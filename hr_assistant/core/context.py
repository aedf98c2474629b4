# Capabilities and per-turn context handed to tools.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from hr_assistant.models.common import Breadcrumb, Message
from hr_assistant.models.hr import PromptConfig
from hr_assistant.utils.logger import console


class Navigator(Protocol):
    """What the front desk may do with the operator's web UI."""

    def set_site(self, site: str) -> None: ...

    def set_tab(self, tab: str) -> None: ...

    def highlight_kpi(self, kpi: Optional[str], clear_after_seconds: Optional[float] = None) -> None: ...

    def toggle_dark_mode(self) -> None: ...


class CallControl(Protocol):
    def end_call(self, delay_seconds: float) -> None: ...


class UiCommandRecorder:
    """
    Navigator and CallControl that records commands; the HTTP layer returns
    them to the browser, which applies them in order.
    """
    def __init__(self):
        self.commands: List[Dict[str, Any]] = []

    def set_site(self, site: str) -> None:
        self.commands.append({"command": "setSite", "site": site})

    def set_tab(self, tab: str) -> None:
        self.commands.append({"command": "setTab", "tab": tab})

    def highlight_kpi(self, kpi: Optional[str], clear_after_seconds: Optional[float] = None) -> None:
        command: Dict[str, Any] = {"command": "highlightKpi", "kpi": kpi}
        if clear_after_seconds is not None:
            command["clearAfterSeconds"] = clear_after_seconds
        self.commands.append(command)

    def toggle_dark_mode(self) -> None:
        self.commands.append({"command": "toggleDarkMode"})

    def end_call(self, delay_seconds: float) -> None:
        self.commands.append({"command": "endCall", "delaySeconds": delay_seconds})


@dataclass
class ToolContext:
    """
    Everything a tool may use besides its arguments. Capabilities are None
    when the caller has no UI or no live call attached.
    """
    session_id: Optional[str] = None
    history: List[Message] = field(default_factory=list)
    prompts: PromptConfig = field(default_factory=PromptConfig)
    navigator: Optional[Navigator] = None
    call_control: Optional[CallControl] = None
    breadcrumbs: List[Breadcrumb] = field(default_factory=list)

    def add_breadcrumb(self, title: str, data: Any = None) -> None:
        console.info(title)
        self.breadcrumbs.append(Breadcrumb(title=title, data=data))
