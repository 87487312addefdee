"""Interactive guessing game over a question tree."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from enum import IntEnum
from typing import Callable, Iterable, List, Optional, TextIO

from .dump import COUNTER_FILENAME, GRAPHVIZ_DUMPS_DIR, TEXT_DUMPS_DIR, dump_tree
from .errors import AkinatorError, TreeErrorCode, error_name
from .stack import Stack, StackItem
from .tree import CallCounter, Node, NodeType, Tree, start_launch_counter
from .treefile import load_tree, save_tree

STACK_CAPACITY = 20
MAX_CONSOLE_STR_SIZE = 50
YES = "да"
NO = "нет"

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
PURPLE = "\x1b[35m"
CYAN = "\x1b[36m"
BLINK = "\x1b[5m"

_MENU = (
    "\n\n"
    + BOLD + PURPLE + "*********************************************\n" + RESET
    + BOLD + PURPLE + "*                  " + BLINK + "АКИНАТОР" + PURPLE + "              *\n" + RESET
    + BOLD + PURPLE + "*********************************************\n\n" + RESET
    + BOLD + YELLOW + "1. " + RESET + GREEN + "Начать новую игру\n" + RESET
    + BOLD + YELLOW + "2. " + RESET + GREEN + "Загрузить сохранение из файла\n" + RESET
    + BOLD + YELLOW + "3. " + RESET + GREEN + "Составить описание объекта\n" + RESET
    + BOLD + YELLOW + "4. " + RESET + GREEN + "Сохранить дерево в файл\n" + RESET
    + BOLD + YELLOW + "5. " + RESET + GREEN + "Сравнить два объекта\n" + RESET
    + BOLD + YELLOW + "6. " + RESET + GREEN + "Графический дамп дерева\n" + RESET
    + BOLD + YELLOW + "7. " + RESET + GREEN + "Об игре\n" + RESET
    + BOLD + YELLOW + "8. " + RESET + GREEN + "Выход\n\n" + RESET
    + BOLD + CYAN + "Выберите пункт меню: " + YELLOW
)

_RETRY_ANSWER = 'Вы можете ответить только "да" или "нет", Попробуте снова'


class _Action(IntEnum):
    PLAY = 1
    IMPORT_TREE = 2
    OBJECT_DESCRIPTION = 3
    SAVE_TREE_TO_FILE = 4
    OBJECTS_COMPARISON = 5
    ABOUT_GAME = 6
    TREE_DUMP = 7
    EXIT = 8


def find_description(tree: Tree, name: str) -> Optional[List[StackItem]]:
    """Return the branch steps from the root to the object, or None if absent."""
    root = tree.root
    if root is None:
        return None
    stack = Stack(STACK_CAPACITY)
    target = name.casefold()

    def search(node: Node) -> bool:
        if node.left is not None:
            stack.push(StackItem(node.text, NodeType.LEFT))
            if search(node.left):
                return True
            stack.pop()
        if node.right is not None:
            stack.push(StackItem(node.text, NodeType.RIGHT))
            if search(node.right):
                return True
            stack.pop()
            return False
        return node is not root and node.text.casefold() == target

    return list(stack) if search(root) else None


def format_description(path: Iterable[StackItem]) -> str:
    """Render branch steps as lines: a property, or its negation for "no" branches."""
    lines = []
    for item in path:
        if item.node_type == NodeType.LEFT:
            lines.append(item.text)
        elif item.node_type == NodeType.RIGHT:
            lines.append(f"не {item.text}")
        else:
            raise AkinatorError(TreeErrorCode.UNKNOWN_ERROR, f"unexpected branch type {item.node_type}")
    return "".join(f"{line}\n" for line in lines)


class Akinator:
    """The menu-driven game bound to a tree, an input source and an output stream."""

    def __init__(
        self,
        tree: Tree,
        counter: CallCounter,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.tree = tree
        self.counter = counter
        self._input = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout
        self.char_delay = 0.005
        self.error_pause = 2.0
        self.counter_path = COUNTER_FILENAME
        self.text_dir = TEXT_DUMPS_DIR
        self.image_dir = GRAPHVIZ_DUMPS_DIR
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _slow_print(self, text: str) -> None:
        for char in text:
            self._write(char)
            if self.char_delay:
                time.sleep(self.char_delay)

    def _read_line(self) -> str:
        try:
            return self._input()
        except EOFError as exc:
            raise AkinatorError(TreeErrorCode.INPUT_SCAN_ERROR, "input ended") from exc

    def _read_word(self) -> str:
        while not self._pending:
            self._pending.extend(self._read_line().split())
        return self._pending.popleft()

    def _read_console(self) -> str:
        line = self._read_line()
        limit = MAX_CONSOLE_STR_SIZE - 1
        if len(line) >= limit:
            self._say("Название объекта слишком длинное, оно было сокращено до первых 50 символов")
            line = line[:limit]
        return line

    def _ask_question(self, node: Node) -> bool:
        self._say(f'Это {node.text}? ("да" or "нет")')
        while True:
            answer = self._read_word().casefold()
            if answer == YES:
                return True
            if answer == NO:
                return False
            self._say(_RETRY_ANSWER)

    def _handle_answer(self, node: Node) -> None:
        self._say(f"Это {node.text}. Я угадал?")
        while True:
            answer = self._read_word()
            if answer == YES:
                self._say("ГОЙДА")
                return
            if answer == NO:
                self._learn(node)
                return
            self._say(_RETRY_ANSWER)

    def _learn(self, node: Node) -> None:
        self._pending.clear()
        self._say("Что тогда это было?")
        new_object = self._read_console()
        self._say("Какими свойствами он обладает?")
        features = self._read_console()
        node.insert_right(node.text)
        node.text = features
        node.insert_left(new_object)
        self._say("Новый объект записан")

    def play(self) -> None:
        """Walk the tree with yes/no questions and learn a new object on a miss."""
        if self.tree.root is None:
            self._slow_print(
                BOLD + RED
                + "\nОшибка: видимо вы забыли загрузить дерево, либо загруженное вами дерево пусто\n"
                + RESET
            )
            if self.error_pause:
                time.sleep(self.error_pause)
            return
        node = self.tree.root
        while True:
            if node.is_question():
                node = node.left if self._ask_question(node) else node.right
            elif node.is_leaf():
                self._handle_answer(node)
                return
            else:
                raise AkinatorError(TreeErrorCode.INCORRECT_TREE, f"node {node.text!r} has a single child")

    def describe(self, name: str) -> Optional[List[StackItem]]:
        """Print the properties leading to an object and return its path."""
        if self.tree.root is None:
            self._say("Дерево пустое")
            return None
        path = find_description(self.tree, name)
        if path is None:
            self._say("Объект не найден")
            return None
        self._say("Объект обладает следующими свойствами:")
        self._write(format_description(path))
        return path

    def _import_tree(self) -> None:
        self._write(BOLD + CYAN + "\nИз какого файла вы хотите заполнить дерево?:\n" + PURPLE)
        filename = self._read_word()
        try:
            loaded = load_tree(filename)
        except AkinatorError as exc:
            if exc.code == TreeErrorCode.FILE_OPEN_ERROR:
                self._slow_print(BOLD + RED + "Ошибка: " + RESET)
            self.tree.clear()
            raise
        self.tree.clear()
        self.tree.root = loaded.root
        self._say(CYAN + "Дерево успешно заполнено!" + RESET)

    def _save_tree(self) -> None:
        self._write(BOLD + CYAN + "\nКуда вы хотите сохранить файл?\n" + RESET)
        filename = self._read_word()
        try:
            save_tree(self.tree, filename)
        except AkinatorError as exc:
            if exc.code == TreeErrorCode.TREE_IS_EMPTY:
                self._say(exc.message)
            raise
        self._say("Дерево успешно сохранено")

    def _dump(self) -> None:
        image = dump_tree(self.tree, self.counter, self.counter_path, self.text_dir, self.image_dir)
        if image is not None:
            self._write(f"Графический дамп сохранен в папке {self.image_dir}")

    def run(self) -> None:
        """Show the menu and handle actions until the user exits."""
        while True:
            self._write(_MENU)
            word = self._read_word()
            try:
                action = int(word)
            except ValueError:
                raise AkinatorError(TreeErrorCode.INPUT_SCAN_ERROR, f"not a menu item: {word!r}") from None

            if action == _Action.PLAY:
                self.play()
            elif action == _Action.IMPORT_TREE:
                self._import_tree()
            elif action == _Action.OBJECT_DESCRIPTION:
                self._write(BOLD + CYAN + "\nНапишите имя объекта, чтобы получить описание\n" + RESET)
                self.describe(self._read_word())
            elif action == _Action.SAVE_TREE_TO_FILE:
                self._save_tree()
            elif action == _Action.OBJECTS_COMPARISON:
                pass
            elif action == _Action.ABOUT_GAME:
                self._say(
                    BOLD + RED + "Акинатор" + BOLD + CYAN
                    + " - это игра, в которой компьютер пытается угадать задуманный вами"
                    " персонаж или предмет с помощью наводящих вопросов." + RESET
                )
            elif action == _Action.TREE_DUMP:
                self._dump()
            elif action == _Action.EXIT:
                return
            else:
                self._say(BOLD + CYAN + "Попробуте заново" + RESET)


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game; return 0 on a clean exit or the error code on failure."""
    parser = argparse.ArgumentParser(prog="akinator", description="Guess an object by asking questions.")
    parser.parse_args(argv)

    TEXT_DUMPS_DIR.mkdir(parents=True, exist_ok=True)
    GRAPHVIZ_DUMPS_DIR.mkdir(parents=True, exist_ok=True)
    tree = Tree()
    try:
        counter = start_launch_counter(COUNTER_FILENAME)
        Akinator(tree, counter).run()
    except AkinatorError as exc:
        print(f"Error: {error_name(exc.code)}: {exc.message}", file=sys.stderr)
        return int(exc.code)
    finally:
        tree.clear()
    return 0