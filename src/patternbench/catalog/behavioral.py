"""Behavioral pattern examples."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from ..core.contract import PatternExample
from ..models.example_models import PatternCategory


# Chain of Responsibility

class SupportHandler:
    """Handles tickets up to its severity limit, otherwise passes them on."""

    def __init__(self, title: str, limit: Optional[int], successor: Optional["SupportHandler"] = None):
        self.title = title
        self.limit = limit
        self.successor = successor

    def handle(self, ticket_id: int, severity: int) -> str:
        if self.limit is None or severity <= self.limit:
            return f"{self.title} handled ticket #{ticket_id} (severity {severity})"
        if self.successor is None:
            return f"ticket #{ticket_id} unhandled (severity {severity})"
        return self.successor.handle(ticket_id, severity)


class ChainOfResponsibilityExample(PatternExample):
    name = "ChainOfResponsibility"
    category = PatternCategory.BEHAVIORAL
    intent = "Pass a request along a chain of handlers until one handles it"
    expected_outcome = (
        "front desk handled ticket #1 (severity 1)",
        "engineer handled ticket #2 (severity 3)",
        "manager handled ticket #3 (severity 5)",
    )

    def setup(self) -> None:
        manager = SupportHandler("manager", None)
        engineer = SupportHandler("engineer", 3, manager)
        self._chain = SupportHandler("front desk", 1, engineer)

    def run(self) -> List[str]:
        return [
            self._chain.handle(ticket_id, severity)
            for ticket_id, severity in enumerate((1, 3, 5), start=1)
        ]


# Command

class TextBuffer:
    def __init__(self):
        self.text = ""


class AppendCommand:
    """Reversible edit operation."""

    def __init__(self, buffer: TextBuffer, fragment: str):
        self._buffer = buffer
        self.fragment = fragment

    def execute(self) -> None:
        self._buffer.text += self.fragment

    def undo(self) -> None:
        self._buffer.text = self._buffer.text[: len(self._buffer.text) - len(self.fragment)]


class CommandHistory:
    def __init__(self):
        self._done: List[AppendCommand] = []

    def execute(self, command: AppendCommand) -> None:
        command.execute()
        self._done.append(command)

    def undo(self) -> None:
        if self._done:
            self._done.pop().undo()


class CommandExample(PatternExample):
    name = "Command"
    category = PatternCategory.BEHAVIORAL
    intent = "Encapsulate a request as an object to queue and undo it"
    expected_outcome = (
        "append 'hello' -> 'hello'",
        "append ' world' -> 'hello world'",
        "undo -> 'hello'",
    )

    def setup(self) -> None:
        self._fragments = ("hello", " world")

    def run(self) -> List[str]:
        buffer = TextBuffer()
        history = CommandHistory()
        lines = []
        for fragment in self._fragments:
            history.execute(AppendCommand(buffer, fragment))
            lines.append(f"append {fragment!r} -> {buffer.text!r}")
        history.undo()
        lines.append(f"undo -> {buffer.text!r}")
        return lines


# Interpreter

@dataclass(frozen=True)
class Number:
    value: int

    def interpret(self) -> int:
        return self.value


@dataclass(frozen=True)
class BinaryOperation:
    operator: str
    left: "Expression"
    right: "Expression"

    def interpret(self) -> int:
        return OPERATORS[self.operator](self.left.interpret(), self.right.interpret())


Expression = Union[Number, BinaryOperation]

OPERATORS: Dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
}


def parse_rpn(source: str) -> Expression:
    """
    Parse a postfix expression into an expression tree.

    Args:
        source: Space separated tokens, e.g. ``"7 3 - 2 +"``

    Returns:
        Root expression node

    Raises:
        ValueError: If the expression is malformed
    """
    stack = []
    for token in source.split():
        if token in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} is missing operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(BinaryOperation(token, left, right))
        else:
            stack.append(Number(int(token)))

    if len(stack) != 1:
        raise ValueError(f"malformed expression: {source!r}")
    return stack[0]


class InterpreterExample(PatternExample):
    name = "Interpreter"
    category = PatternCategory.BEHAVIORAL
    intent = "Represent a grammar as objects and evaluate sentences with them"
    expected_outcome = (
        "7 3 - 2 + = 6",
        "2 3 4 + + = 9",
    )

    def setup(self) -> None:
        self._sources = ("7 3 - 2 +", "2 3 4 + +")

    def run(self) -> List[str]:
        return [f"{source} = {parse_rpn(source).interpret()}" for source in self._sources]


# Iterator

class Playlist:
    def __init__(self, songs: Tuple[str, ...]):
        self._songs = songs

    def __iter__(self) -> Iterator[str]:
        index = 0
        while index < len(self._songs):
            yield self._songs[index]
            index += 1

    def reverse_order(self) -> Iterator[str]:
        index = len(self._songs) - 1
        while index >= 0:
            yield self._songs[index]
            index -= 1


class IteratorExample(PatternExample):
    name = "Iterator"
    category = PatternCategory.BEHAVIORAL
    intent = "Traverse a collection without exposing its representation"
    expected_outcome = (
        "forward: intro, verse, chorus",
        "reverse: chorus, verse, intro",
    )

    def setup(self) -> None:
        self._playlist = Playlist(("intro", "verse", "chorus"))

    def run(self) -> List[str]:
        return [
            f"forward: {', '.join(self._playlist)}",
            f"reverse: {', '.join(self._playlist.reverse_order())}",
        ]


# Mediator

class ChatRoom:
    """Routes messages so participants never reference each other."""

    def __init__(self):
        self._members: Dict[str, "ChatMember"] = {}
        self.transcript: List[str] = []

    def join(self, member: "ChatMember") -> None:
        self._members[member.name] = member
        member.room = self

    def broadcast(self, sender: str, message: str) -> None:
        for name, member in self._members.items():
            if name != sender:
                member.receive(sender, message)

    def direct(self, sender: str, recipient: str, message: str) -> None:
        self._members[recipient].receive(sender, message)


class ChatMember:
    def __init__(self, name: str):
        self.name = name
        self.room: Optional[ChatRoom] = None

    def say(self, message: str) -> None:
        self.room.broadcast(self.name, message)

    def tell(self, recipient: str, message: str) -> None:
        self.room.direct(self.name, recipient, message)

    def receive(self, sender: str, message: str) -> None:
        self.room.transcript.append(f"{self.name} received {message!r} from {sender}")


class MediatorExample(PatternExample):
    name = "Mediator"
    category = PatternCategory.BEHAVIORAL
    intent = "Centralize how a set of objects interact"
    expected_outcome = (
        "bob received 'hello' from alice",
        "carol received 'hello' from alice",
        "alice received 'hi' from bob",
    )

    def setup(self) -> None:
        self._room = ChatRoom()
        self._members = {name: ChatMember(name) for name in ("alice", "bob", "carol")}
        for member in self._members.values():
            self._room.join(member)

    def run(self) -> List[str]:
        self._room.transcript = []
        self._members["alice"].say("hello")
        self._members["bob"].tell("alice", "hi")
        return list(self._room.transcript)


# Memento

@dataclass(frozen=True)
class EditorSnapshot:
    content: str


class Editor:
    def __init__(self):
        self.content = ""

    def type(self, text: str) -> None:
        self.content += text

    def save(self) -> EditorSnapshot:
        return EditorSnapshot(self.content)

    def restore(self, snapshot: EditorSnapshot) -> None:
        self.content = snapshot.content


class MementoExample(PatternExample):
    name = "Memento"
    category = PatternCategory.BEHAVIORAL
    intent = "Capture and restore an object's state without breaking encapsulation"
    expected_outcome = (
        "content: 'draft 1'",
        "content: 'draft 1 + edits'",
        "restored: 'draft 1'",
    )

    def setup(self) -> None:
        self._editor = Editor()

    def run(self) -> List[str]:
        self._editor.restore(EditorSnapshot(""))
        self._editor.type("draft 1")
        lines = [f"content: {self._editor.content!r}"]
        snapshot = self._editor.save()
        self._editor.type(" + edits")
        lines.append(f"content: {self._editor.content!r}")
        self._editor.restore(snapshot)
        lines.append(f"restored: {self._editor.content!r}")
        return lines


# Observer

class WeatherStation:
    """Publishes temperature readings to subscribed callbacks."""

    def __init__(self):
        self._subscribers: List[Callable[[int], None]] = []

    def subscribe(self, callback: Callable[[int], None]) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[int], None]) -> None:
        self._subscribers.remove(callback)

    def publish(self, celsius: int) -> None:
        for callback in list(self._subscribers):
            callback(celsius)


class ObserverExample(PatternExample):
    name = "Observer"
    category = PatternCategory.BEHAVIORAL
    intent = "Notify dependents automatically when an object changes state"
    expected_outcome = (
        "display: 25C",
        "display: 32C",
        "alert: heat warning at 32C",
        "alert: heat warning at 35C",
    )

    HEAT_THRESHOLD = 30

    def setup(self) -> None:
        self._station = WeatherStation()

    def run(self) -> List[str]:
        lines: List[str] = []

        def display(celsius: int) -> None:
            lines.append(f"display: {celsius}C")

        def alert(celsius: int) -> None:
            if celsius > self.HEAT_THRESHOLD:
                lines.append(f"alert: heat warning at {celsius}C")

        self._station.subscribe(display)
        self._station.subscribe(alert)
        self._station.publish(25)
        self._station.publish(32)
        self._station.unsubscribe(display)
        self._station.publish(35)
        self._station.unsubscribe(alert)
        return lines


# State

class DocumentState(str, Enum):
    DRAFT = "draft"
    MODERATION = "moderation"
    PUBLISHED = "published"


PUBLISH_TRANSITIONS: Dict[DocumentState, DocumentState] = {
    DocumentState.DRAFT: DocumentState.MODERATION,
    DocumentState.MODERATION: DocumentState.PUBLISHED,
}


class Document:
    """Behavior of publish() depends on the current state."""

    def __init__(self):
        self.state = DocumentState.DRAFT

    def publish(self) -> str:
        target = PUBLISH_TRANSITIONS.get(self.state)
        if target is None:
            return f"{self.state.value}: no change"
        previous, self.state = self.state, target
        return f"{previous.value} -> {target.value}"


class StateExample(PatternExample):
    name = "State"
    category = PatternCategory.BEHAVIORAL
    intent = "Alter an object's behavior when its internal state changes"
    expected_outcome = (
        "draft -> moderation",
        "moderation -> published",
        "published: no change",
    )

    def setup(self) -> None:
        self._document = Document()

    def run(self) -> List[str]:
        self._document.state = DocumentState.DRAFT
        return [self._document.publish() for _ in range(3)]


# Strategy

PaymentStrategy = Callable[[int], str]


def pay_by_credit_card(amount: int) -> str:
    return f"paid {amount} with credit card"


def pay_by_paypal(amount: int) -> str:
    return f"paid {amount} using PayPal"


class Checkout:
    """Context holding the currently selected payment strategy."""

    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy

    def pay(self, amount: int) -> str:
        return self.strategy(amount)


class StrategyExample(PatternExample):
    name = "Strategy"
    category = PatternCategory.BEHAVIORAL
    intent = "Swap an algorithm at runtime behind a common interface"
    expected_outcome = (
        "paid 15 with credit card",
        "paid 15 using PayPal",
    )

    def setup(self) -> None:
        self._checkout = Checkout(pay_by_credit_card)

    def run(self) -> List[str]:
        lines = []
        for strategy in (pay_by_credit_card, pay_by_paypal):
            self._checkout.strategy = strategy
            lines.append(self._checkout.pay(15))
        return lines


# Template Method

class DataExporter:
    """export() is the fixed skeleton; subclasses fill in the steps."""

    label = ""

    def export(self, rows: List[Tuple[str, int]]) -> str:
        parts = [self.header()] + [self.format_row(name, score) for name, score in rows]
        footer = self.footer(rows)
        if footer:
            parts.append(footer)
        return f"{self.label}: " + " / ".join(parts)

    def header(self) -> str:
        raise NotImplementedError

    def format_row(self, name: str, score: int) -> str:
        raise NotImplementedError

    def footer(self, rows: List[Tuple[str, int]]) -> Optional[str]:
        return None


class CsvExporter(DataExporter):
    label = "csv"

    def header(self) -> str:
        return "name,score"

    def format_row(self, name: str, score: int) -> str:
        return f"{name},{score}"


class TextExporter(DataExporter):
    label = "text"

    def header(self) -> str:
        return "NAME SCORE"

    def format_row(self, name: str, score: int) -> str:
        return f"{name} {score}"

    def footer(self, rows: List[Tuple[str, int]]) -> Optional[str]:
        return f"({len(rows)} rows)"


class TemplateMethodExample(PatternExample):
    name = "TemplateMethod"
    category = PatternCategory.BEHAVIORAL
    intent = "Define an algorithm's skeleton and defer some steps to subclasses"
    expected_outcome = (
        "csv: name,score / ada,9 / bob,7",
        "text: NAME SCORE / ada 9 / bob 7 / (2 rows)",
    )

    def setup(self) -> None:
        self._rows = [("ada", 9), ("bob", 7)]
        self._exporters = [CsvExporter(), TextExporter()]

    def run(self) -> List[str]:
        return [exporter.export(self._rows) for exporter in self._exporters]


# Visitor

class ShapeTag(str, Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"


class ShapeVisitor:
    """Dispatches a closed set of shape tags through visit(tag, payload)."""

    def __init__(self):
        self._handlers: Dict[ShapeTag, Callable[[Dict[str, float]], str]] = {
            ShapeTag.CIRCLE: self.visit_circle,
            ShapeTag.RECTANGLE: self.visit_rectangle,
        }

    def visit(self, tag: ShapeTag, payload: Dict[str, float]) -> str:
        return self._handlers[ShapeTag(tag)](payload)

    def visit_circle(self, payload: Dict[str, float]) -> str:
        raise NotImplementedError

    def visit_rectangle(self, payload: Dict[str, float]) -> str:
        raise NotImplementedError


class AreaVisitor(ShapeVisitor):
    def visit_circle(self, payload: Dict[str, float]) -> str:
        return f"area of circle: {math.pi * payload['radius'] ** 2:.2f}"

    def visit_rectangle(self, payload: Dict[str, float]) -> str:
        return f"area of rectangle: {payload['width'] * payload['height']:.2f}"


class ExportVisitor(ShapeVisitor):
    def visit_circle(self, payload: Dict[str, float]) -> str:
        return f"export circle(radius={payload['radius']})"

    def visit_rectangle(self, payload: Dict[str, float]) -> str:
        return f"export rectangle(width={payload['width']}, height={payload['height']})"


class VisitorExample(PatternExample):
    name = "Visitor"
    category = PatternCategory.BEHAVIORAL
    intent = "Add operations over a set of element types without changing them"
    expected_outcome = (
        "area of circle: 3.14",
        "area of rectangle: 6.00",
        "export circle(radius=1.0)",
        "export rectangle(width=2.0, height=3.0)",
    )

    def setup(self) -> None:
        self._shapes = [
            (ShapeTag.CIRCLE, {"radius": 1.0}),
            (ShapeTag.RECTANGLE, {"width": 2.0, "height": 3.0}),
        ]
        self._visitors = [AreaVisitor(), ExportVisitor()]

    def run(self) -> List[str]:
        return [
            visitor.visit(tag, payload)
            for visitor in self._visitors
            for tag, payload in self._shapes
        ]


EXAMPLES = [
    ChainOfResponsibilityExample,
    CommandExample,
    InterpreterExample,
    IteratorExample,
    MediatorExample,
    MementoExample,
    ObserverExample,
    StateExample,
    StrategyExample,
    TemplateMethodExample,
    VisitorExample,
]
