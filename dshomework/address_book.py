"""Address book kept in an AVL tree ordered by contact id."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_INPUT = "inputProblem2.txt"
DEFAULT_OUTPUT = "outputProblem2.txt"
_INDENT = 6


class DuplicateContactError(ValueError):
    """Raised when a contact id is already in the book."""


class ContactNotFoundError(LookupError):
    """Raised when a contact id is not in the book."""


@dataclass
class Contact:
    contact_id: int
    name: str
    phone: str
    email: str


@dataclass
class _Node:
    contact: Contact
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1

    @property
    def key(self) -> int:
        return self.contact.contact_id


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    top.left = pivot.right
    pivot.right = top
    _update(top)
    _update(pivot)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    top.right = pivot.left
    pivot.left = top
    _update(top)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, contact: Contact) -> _Node:
    if node is None:
        return _Node(contact)
    if contact.contact_id < node.key:
        node.left = _insert(node.left, contact)
    elif contact.contact_id > node.key:
        node.right = _insert(node.right, contact)
    else:
        raise DuplicateContactError(
            f"Error: The contact with ID {contact.contact_id} already exists!"
        )
    return _rebalance(node)


def _delete(node: _Node | None, contact_id: int) -> _Node | None:
    if node is None:
        raise ContactNotFoundError("Error: Contact not found!")
    if contact_id < node.key:
        node.left = _delete(node.left, contact_id)
    elif contact_id > node.key:
        node.right = _delete(node.right, contact_id)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.contact = successor.contact
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AddressBook:
    """Contacts stored in a self-balancing search tree keyed by id."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, contact_id: object) -> bool:
        try:
            self.find(contact_id)  # type: ignore[arg-type]
        except ContactNotFoundError:
            return False
        return True

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts())

    def add(self, contact_id: int, name: str, phone: str, email: str) -> Contact:
        """Insert a new contact; raise DuplicateContactError if the id is taken."""
        contact = Contact(contact_id, name, phone, email)
        self._root = _insert(self._root, contact)
        self._size += 1
        return contact

    def find(self, contact_id: int) -> Contact:
        """Return the contact with ``contact_id``."""
        node = self._root
        while node is not None:
            if contact_id == node.key:
                return node.contact
            node = node.left if contact_id < node.key else node.right
        raise ContactNotFoundError("Error: Contact not found!")

    def delete(self, contact_id: int) -> None:
        """Remove the contact with ``contact_id``."""
        self._root = _delete(self._root, contact_id)
        self._size -= 1

    def contacts(self) -> list[Contact]:
        """All contacts in ascending id order."""

        def walk(node: _Node | None) -> Iterator[Contact]:
            if node is not None:
                yield from walk(node.left)
                yield node.contact
                yield from walk(node.right)

        return list(walk(self._root))

    def tree_lines(self) -> list[str]:
        """The tree drawn sideways: right subtree first, ids indented by depth."""

        def walk(node: _Node | None, width: int) -> Iterator[str]:
            if node is not None:
                width += _INDENT
                yield from walk(node.right, width)
                yield str(node.key).rjust(width)
                yield from walk(node.left, width)

        return list(walk(self._root, 0))

    def height(self) -> int:
        """Height of the tree; zero when the book is empty."""
        return _height(self._root)


_MENU = (
    "\nAddress Book Application\n"
    "------------------------\n"
    "1. Add New Contact\n"
    "2. Search for Contact\n"
    "3. Delete Contact\n"
    "4. List All Contacts (Sorted by ID)\n"
    "5. Display Current Tree Structure\n"
    "6. Exit\n"
    "Enter operation: "
)

_INT = re.compile(r"\s*([+-]?\d+)")


class _Reader:
    """Reads integers and whole lines from a block of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read_int(self) -> int | None:
        match = _INT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group(1))

    def skip_char(self) -> None:
        self._pos = min(self._pos + 1, len(self._text))

    def read_line(self) -> str:
        newline = self._text.find("\n", self._pos)
        if newline < 0:
            line, self._pos = self._text[self._pos:], len(self._text)
        else:
            line, self._pos = self._text[self._pos:newline], newline + 1
        return line


def _format_contact(contact: Contact) -> str:
    return (
        f"ID: {contact.contact_id}, Name: {contact.name}, "
        f"Phone: {contact.phone}, Email: {contact.email}\n"
    )


def run_session(text: str) -> str:
    """Run the interactive menu over ``text`` as input and return the transcript.

    The session ends at option 6 or when no further option can be read.
    """
    book = AddressBook()
    reader = _Reader(text)
    out: list[str] = []

    while True:
        out.append(_MENU)
        choice = reader.read_int()
        if choice is None:
            break
        out.append(f"{choice}\n")

        if choice == 1:
            out.append("Enter unique ID (integer): ")
            contact_id = reader.read_int()
            if contact_id is None:
                break
            out.append(f"{contact_id}\n")
            reader.skip_char()
            fields = []
            for prompt in ("Enter name: ", "Enter phone: ", "Enter email: "):
                value = reader.read_line()
                out.append(f"{prompt}{value}\n")
                fields.append(value)
            try:
                book.add(contact_id, *fields)
            except DuplicateContactError as exc:
                out.append(f"{exc}\n")
        elif choice == 2:
            out.append("Enter ID to search: ")
            contact_id = reader.read_int()
            if contact_id is None:
                break
            out.append(f"{contact_id}\n")
            try:
                found = book.find(contact_id)
            except ContactNotFoundError as exc:
                out.append(f"\n{exc}\n")
            else:
                out.append("\nContact found\n")
                out.append(f"ID: {found.contact_id}\n")
                out.append(f"Name: {found.name}\n")
                out.append(f"Phone: {found.phone}\n")
                out.append(f"Email: {found.email}\n")
        elif choice == 3:
            out.append("Enter ID to delete: ")
            contact_id = reader.read_int()
            if contact_id is None:
                break
            out.append(f"{contact_id}\n")
            try:
                book.delete(contact_id)
            except ContactNotFoundError as exc:
                out.append(f"{exc}\n")
            else:
                out.append("\nContact deleted successfully.\n")
        elif choice == 4:
            out.append("\nContacts in Address Book (sorted by ID):\n")
            if not len(book):
                out.append("Address Book is empty.\n")
            else:
                out.extend(_format_contact(c) for c in book.contacts())
        elif choice == 5:
            out.append("\nCurrent AVL Tree:\n")
            out.extend(f"{line}\n" for line in book.tree_lines())
        elif choice == 6:
            out.append("Exiting Address Book. Goodbye!\n")
            break
        else:
            out.append("Invalid option. Please try again.\n")

    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Replay a scripted address-book session from a file into another file."""
    parser = argparse.ArgumentParser(description="Run a scripted address book session.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Error: Input file '{args.input}' not found.", file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as handle:
        handle.write(run_session(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())