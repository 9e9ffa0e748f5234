import re
import sys
from typing import TextIO

from .debug import dump_table, printf, printf_err
from .table import NotFound, Table, set_debug_trace_resize


def count_words(text: str, table: Table):
    for word in re.findall(r"\w+", text.lower()):
        table.insert(word)


def run_command(table: Table, line: str):
    parts = line.split()
    if len(parts) == 0:
        return

    command, args = parts[0], parts[1:]
    match command, args:
        case "insert", [word]:
            table.insert(word)
        case "remove", [word]:
            removed = table.remove(word)
            if isinstance(removed, NotFound):
                printf("not found\n")
            else:
                printf("{0}\n", removed)
        case "contains", [word]:
            printf("{0}\n", "true" if table.contains(word) else "false")
        case "freq", [word]:
            printf("{0:d}\n", table.frequency_of(word))
        case "hash", [word]:
            printf("{0:d}\n", table.hash_of(word))
        case "size", []:
            printf("{0:d}\n", table.size())
        case "collisions", []:
            printf("{0:d}\n", table.collision_count())
        case "display", []:
            printf("{0}\n", table.display())
        case "dump", []:
            dump_table(table, "table")
        case _:
            printf_err("Unknown command '{0}'\n", line.strip())


def repl(table: Table, stream: TextIO):
    for line in stream:
        run_command(table, line)


def run_file(table: Table, filepath: str):
    try:
        with open(filepath) as fp:
            count_words(fp.read(), table)
    except OSError as e:
        printf_err("Could not read '{0}': {1}\n", filepath, e.strerror)
        sys.exit(74)

    printf("{0}\n", table.display())
    printf("size: {0:d}\n", table.size())
    printf("collisions: {0:d}\n", table.collision_count())
    printf("capacity: {0:d}\n", table.capacity)


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv

    if "--trace-resize" in args:
        set_debug_trace_resize(True)
        args = [arg for arg in args if arg != "--trace-resize"]

    table = Table()
    if len(args) == 0:
        repl(table, sys.stdin)
    elif len(args) == 1:
        run_file(table, args[0])
    else:
        printf_err("Usage: freqtable [--trace-resize] [path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()
