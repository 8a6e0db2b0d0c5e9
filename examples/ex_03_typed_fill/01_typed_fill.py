"""Typed retrieval with ``fill`` and ``Slot``.

``fill`` writes the resolved value into a slot only when its concrete type is
exactly the slot's type. A mismatch raises ``TypeMismatchError`` and leaves the
slot empty.
"""

from __future__ import annotations

from lazywire import Container, Slot, TypeMismatchError


class Mailer:
    def send(self, to: str) -> str:
        return f"sent to {to}"


def main() -> None:
    container = Container()
    container.set("mailer", lambda c: Mailer())

    mailer_slot = Slot(Mailer)
    container.fill("mailer", mailer_slot)
    print(mailer_slot.value.send("ops@example.com"))  # => sent to ops@example.com

    wrong_slot = Slot(str)
    try:
        container.fill("mailer", wrong_slot)
    except TypeMismatchError as error:
        print(f"expected={error.expected.__name__} actual={error.actual.__name__}")  # => expected=str actual=Mailer

    print(f"wrong_slot_filled={wrong_slot.is_filled}")  # => wrong_slot_filled=False


if __name__ == "__main__":
    main()
