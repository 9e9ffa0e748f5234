import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def dump_table(table: Any, name: str):
    """Print one line per slot: index, contents and, for live keys, the home
    bucket the key hashes to. Keys sitting away from home were displaced by
    probing."""
    # table.py imports printf from here
    from .table import Occupied

    printf("== {0:s} ==\n", name)

    for index, slot in enumerate(table.slots):
        printf("{0:04d} ", index)
        if not isinstance(slot, Occupied):
            printf("{0}\n", slot)
            continue

        home = table.hash_of(slot.key)
        if home == index:
            printf("{0}\n", slot)
        else:
            printf("{0}  <- {1:04d}\n", slot, home)

    printf(
        "size={0:d} occupied={1:d} collisions={2:d} load={3:.2f}\n",
        table.size(),
        table.occupied_count,
        table.collision_count(),
        table.load_factor(),
    )
