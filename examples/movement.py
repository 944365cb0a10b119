# examples/movement.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
#
# Run with: python examples/movement.py

from enum import Enum, auto

from declstate import MachineBuilder, StateMachine


class Movement(Enum):
    STANDING = auto()
    WALKING = auto()
    RUNNING = auto()


class Move(Enum):
    WALK = auto()
    RUN = auto()
    HOLD = auto()


class Handler:
    def __init__(self, old_state: Movement, new_state: Movement) -> None:
        self.old_state = old_state
        self.new_state = new_state

    def __call__(self) -> None:
        raise NotImplementedError()

    @property
    def transition(self) -> str:
        return f"{self.old_state.name.lower()} -> {self.new_state.name.lower()}"


class WalkHandler(Handler):
    def __call__(self) -> None:
        print(f"Walking now. Transition was: {self.transition}")


class RunHandler(Handler):
    def __call__(self) -> None:
        print(f"Running now. Transition was: {self.transition}")


class HoldHandler(Handler):
    def __call__(self) -> None:
        print(f"Standing now. Transition was: {self.transition}")


class EventHandlerFactory:
    HANDLERS = {
        Move.WALK: WalkHandler,
        Move.RUN: RunHandler,
        Move.HOLD: HoldHandler,
    }

    @classmethod
    def create(cls, event: Move, old_state: Movement, new_state: Movement) -> Handler:
        return cls.HANDLERS[event](old_state, new_state)


class MovementState(StateMachine):
    definition = (
        MachineBuilder()
        .state(Movement.STANDING, initial=True)
        .state(Movement.WALKING)
        .state(Movement.RUNNING)
        .event(Move.WALK, lambda e: e.transitions(Movement.STANDING, Movement.WALKING))
        .event(Move.RUN, lambda e: e.transitions([Movement.STANDING, Movement.WALKING], Movement.RUNNING))
        .event(Move.HOLD, lambda e: e.transitions([Movement.WALKING, Movement.RUNNING], Movement.STANDING))
    )

    def state_changed(self, event: Move, old_state: Movement, new_state: Movement) -> None:
        EventHandlerFactory.create(event, old_state, new_state)()


def main() -> None:
    m = MovementState()
    m.walk()
    m.run()
    m.hold()

    m.run()
    m.hold()


if __name__ == "__main__":
    main()
