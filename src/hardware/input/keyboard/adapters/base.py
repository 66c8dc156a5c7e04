from typing import Protocol


class IKeyboardAdapter(Protocol):
    """
    Keyboard input abstraction.

    Implementations:
    - publish KeyboardKeyPressEvent to the EventBus
    - return when the input ends (EOF), raise RuntimeError if they cannot start
    """

    async def run(self) -> None:
        ...
