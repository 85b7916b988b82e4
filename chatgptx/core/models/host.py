"""Host-side inputs of one invocation."""
from dataclasses import dataclass

SHIFT_MASK = 1 << 17
OPTION_MASK = 1 << 19


@dataclass(frozen=True)
class ModifierState:
    """Keyboard modifiers held during the triggering gesture."""
    shift: bool = False  # secondary language / clear chat history
    option: bool = False  # force preview

    @classmethod
    def from_flags(cls, flags: int) -> "ModifierState":
        """Decode a host modifier bit mask."""
        return cls(shift=bool(flags & SHIFT_MASK), option=bool(flags & OPTION_MASK))


@dataclass(frozen=True)
class HostContext:
    """Calling application and what the host can do with it."""
    app_identifier: str
    app_name: str = ""
    can_paste: bool = False
    can_copy: bool = True
