"""State pattern: a TCP connection whose behaviour follows its current state.

The State pattern lets an object change its behaviour when its internal state
changes, so that it appears to change its class. Each state lives in its own
class and the owning object (the context) forwards every request to whichever
state is active.

Participants:
    - ConnectionState: the capability set {open, close, send_data, receive_data}
    - ClosedState, ListeningState, EstablishedState: one variant per state
    - TCPConnection: the context; owns exactly one active state

State operations never touch the connection. They return a ``StateOutcome``
carrying the message to report and, where the operation implies one, the tag
of the next state. The connection applies that transition when its transition
mode is ``APPLY`` and only reports it when the mode is ``DESCRIBE``:

    Closed      --open-->          Listening
    Listening   --close-->         Closed
    Listening   --receive_data-->  Established
    Established --close-->         Closed

Operations that are not valid in the current state (sending while closed, for
instance) are reported through the outcome and never raise.

The connection is a teaching stand-in and never opens a socket.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from pattern_catalog.config.schemas import TransitionMode
from pattern_catalog.domain.exceptions import InvalidStateTransitionError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ConnectionStateType(str, Enum):
    """Closed set of connection states."""
    CLOSED = "closed"
    LISTENING = "listening"
    ESTABLISHED = "established"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class StateOutcome:
    """Result of a state operation."""
    message: str
    next_state: Optional[ConnectionStateType] = None
    accepted: bool = True

    @property
    def is_transition(self) -> bool:
        return self.next_state is not None


@dataclass(frozen=True)
class StateChange:
    """One replacement of a connection's active state."""
    from_state: ConnectionStateType
    to_state: ConnectionStateType
    trigger: str


class ConnectionState(ABC):
    """Behaviour of a connection in one particular state."""

    state_type: ConnectionStateType

    @abstractmethod
    def open(self) -> StateOutcome:
        """Open the connection."""

    @abstractmethod
    def close(self) -> StateOutcome:
        """Close the connection."""

    @abstractmethod
    def send_data(self, payload: str = "") -> StateOutcome:
        """Send a payload."""

    @abstractmethod
    def receive_data(self, payload: str = "") -> StateOutcome:
        """Receive a payload."""

    def _transition_to(self, target: ConnectionStateType) -> StateOutcome:
        return StateOutcome(
            f"Transitioning from {self.state_type.label} to {target.label} state.",
            next_state=target,
        )

    def _already_here(self) -> StateOutcome:
        return StateOutcome(f"Already in {self.state_type.label} state.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ClosedState(ConnectionState):
    state_type = ConnectionStateType.CLOSED

    def open(self) -> StateOutcome:
        return self._transition_to(ConnectionStateType.LISTENING)

    def close(self) -> StateOutcome:
        return self._already_here()

    def send_data(self, payload: str = "") -> StateOutcome:
        return StateOutcome("Cannot send data. Connection is closed.", accepted=False)

    def receive_data(self, payload: str = "") -> StateOutcome:
        return StateOutcome("Cannot receive data. Connection is closed.", accepted=False)


class ListeningState(ConnectionState):
    state_type = ConnectionStateType.LISTENING

    def open(self) -> StateOutcome:
        return self._already_here()

    def close(self) -> StateOutcome:
        return self._transition_to(ConnectionStateType.CLOSED)

    def send_data(self, payload: str = "") -> StateOutcome:
        return StateOutcome("Cannot send data. Connection is in Listening state.", accepted=False)

    def receive_data(self, payload: str = "") -> StateOutcome:
        return self._transition_to(ConnectionStateType.ESTABLISHED)


class EstablishedState(ConnectionState):
    state_type = ConnectionStateType.ESTABLISHED

    def open(self) -> StateOutcome:
        return self._already_here()

    def close(self) -> StateOutcome:
        return self._transition_to(ConnectionStateType.CLOSED)

    def send_data(self, payload: str = "") -> StateOutcome:
        return StateOutcome(f"Sending data: {payload}")

    def receive_data(self, payload: str = "") -> StateOutcome:
        return StateOutcome(f"Receiving data: {payload}")


# States carry no data, so one shared instance per variant is enough
STATES: Dict[ConnectionStateType, ConnectionState] = {
    ConnectionStateType.CLOSED: ClosedState(),
    ConnectionStateType.LISTENING: ListeningState(),
    ConnectionStateType.ESTABLISHED: EstablishedState(),
}

StateLike = Union[ConnectionState, ConnectionStateType, str]


def get_state(state: StateLike) -> ConnectionState:
    """
    Resolve a state object, tag or name to the shared state instance.

    Raises:
        ValueError: If a name does not match any state
    """
    if isinstance(state, ConnectionState):
        return state
    if isinstance(state, ConnectionStateType):
        return STATES[state]
    return STATES[ConnectionStateType(state.strip().lower())]


def _resolve_state(state: StateLike, current: Optional[str]) -> ConnectionState:
    try:
        return get_state(state)
    except ValueError as e:
        raise InvalidStateTransitionError(current, str(state)) from e


class TCPConnection:
    """
    Context object forwarding every operation to its active state.

    Args:
        initial_state: State the connection starts in (Closed by default)
        console: Where operation messages are written (stdout by default)
        transition_mode: Whether outcomes that name a next state are applied
    """

    def __init__(
        self,
        initial_state: StateLike = ConnectionStateType.CLOSED,
        console: Optional[Console] = None,
        transition_mode: TransitionMode = TransitionMode.APPLY,
    ):
        self._console = default_console(console)
        self._transition_mode = TransitionMode(transition_mode)
        self._state = _resolve_state(initial_state, current=None)
        self._history: List[StateChange] = []

    @property
    def state(self) -> ConnectionStateType:
        return self._state.state_type

    @property
    def current_state(self) -> ConnectionState:
        return self._state

    @property
    def transition_mode(self) -> TransitionMode:
        return self._transition_mode

    @property
    def history(self) -> List[StateChange]:
        return list(self._history)

    def set_state(self, new_state: StateLike) -> None:
        """Replace the active state. Any state may follow any other."""
        self._change_state(_resolve_state(new_state, self.state.value), trigger="set_state")

    def open(self) -> StateOutcome:
        return self._dispatch("open", lambda state: state.open())

    def close(self) -> StateOutcome:
        return self._dispatch("close", lambda state: state.close())

    def send_data(self, payload: str = "") -> StateOutcome:
        return self._dispatch("send_data", lambda state: state.send_data(payload))

    def receive_data(self, payload: str = "") -> StateOutcome:
        return self._dispatch("receive_data", lambda state: state.receive_data(payload))

    def _dispatch(
        self, operation: str, call: Callable[[ConnectionState], StateOutcome]
    ) -> StateOutcome:
        outcome = call(self._state)
        self._console.write(outcome.message)

        if not outcome.accepted:
            logger.info("Operation rejected", operation=operation, state=self.state.value)
        elif outcome.next_state is not None:
            if self._transition_mode == TransitionMode.APPLY:
                self._change_state(STATES[outcome.next_state], trigger=operation)
            else:
                logger.debug(
                    "Transition described, not applied",
                    operation=operation,
                    state=self.state.value,
                    next_state=outcome.next_state.value,
                )
        return outcome

    def _change_state(self, new_state: ConnectionState, trigger: str) -> None:
        change = StateChange(self.state, new_state.state_type, trigger)
        self._state = new_state
        self._history.append(change)
        logger.debug(
            "Connection state changed",
            from_state=change.from_state.value,
            to_state=change.to_state.value,
            trigger=trigger,
        )

    def __repr__(self) -> str:
        return f"TCPConnection(state={self.state.value}, mode={self._transition_mode.value})"


PATTERN_INFO = PatternInfo(
    name="state",
    title="State",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Allow an object to alter its behaviour when its internal state changes. "
        "State-specific behaviour lives in separate state classes and the context "
        "delegates to whichever one is active."
    ),
    participants=[
        "ConnectionState: capability set every state implements",
        "ClosedState / ListeningState / EstablishedState: concrete states",
        "TCPConnection: context holding the active state",
    ],
    advantages=[
        "State-specific behaviour is encapsulated per class",
        "Transitions are explicit and easy to follow",
        "New states can be added without touching the context",
    ],
    examples=[
        "Media players switching between playing, paused and stopped",
        "Order processing moving through pending, shipped and delivered",
    ],
    module=__name__,
)


def run_demo(console: Console, transition_mode: TransitionMode = TransitionMode.APPLY) -> None:
    """Drive a connection through the classic closed/listening/established scenario."""
    connection = TCPConnection(console=console, transition_mode=transition_mode)

    connection.send_data("Hello")
    connection.receive_data("Hi")

    connection.set_state(ConnectionStateType.LISTENING)
    connection.receive_data("Hello")

    connection.set_state(ConnectionStateType.ESTABLISHED)
    connection.send_data("Hello")
    connection.receive_data("Hi")

    connection.close()


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
