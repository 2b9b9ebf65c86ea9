from __future__ import annotations

from typing import Callable, TypeVar

import click

from .exceptions import WordListError
from .wordlist import WordListEditor

T = TypeVar("T")


@click.group(name="words")
def words_group() -> None:
    """Commands for editing hunspell dictionaries, rulesets and templates."""


@words_group.command("create")
@click.argument("path", type=click.Path(dir_okay=False))
def create_list(path: str) -> None:
    """Create an empty word list."""
    _run(lambda: WordListEditor().create(path))
    click.echo(f"Created {path}")


@words_group.command("delete")
@click.argument("path", type=click.Path(dir_okay=False))
def delete_list(path: str) -> None:
    """Delete a word list."""
    _run(lambda: WordListEditor().delete(path))
    click.echo(f"Deleted {path}")


@words_group.command("add")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("word")
def add_word(path: str, word: str) -> None:
    """Add WORD to the list at PATH."""
    _run(lambda: WordListEditor().add_word(path, word))


@words_group.command("remove")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("word")
def remove_word(path: str, word: str) -> None:
    """Remove WORD from the list at PATH."""
    _run(lambda: WordListEditor().delete_word(path, word))


@words_group.command("edit")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("word")
@click.argument("new_word")
def edit_word(path: str, word: str, new_word: str) -> None:
    """Replace WORD with NEW_WORD in the list at PATH."""
    _run(lambda: WordListEditor().edit_word(path, word, new_word))


@words_group.command("list")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def list_words(path: str) -> None:
    """Print the words stored at PATH, one per line."""
    for word in _run(lambda: WordListEditor().list_words(path)):
        click.echo(word)


def _run(operation: Callable[[], T]) -> T:
    try:
        return operation()
    except WordListError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:
    words_group()


if __name__ == "__main__":
    main()
