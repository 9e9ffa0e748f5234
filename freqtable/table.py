from dataclasses import dataclass
from typing import Callable, Iterator

from .debug import printf
from .hashing import INVALID_HASH, horner_hash, next_prime


DEFAULT_CAPACITY = 10

TABLE_MAX_LOAD = 0.5


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class Empty:
    def __str__(self) -> str:
        return "**"


@dataclass(frozen=True)
class Tombstone:
    def __str__(self) -> str:
        return "#DEL#"


@dataclass
class Occupied:
    key: str
    frequency: int

    def __str__(self) -> str:
        return f"[{self.key}, {self.frequency}]"


Slot = Empty | Tombstone | Occupied


@dataclass(frozen=True)
class NotFound:
    pass


class InvalidArgument(ValueError):
    pass


HashFunc = Callable[[str, int], int]


def _is_blank(key: str | None) -> bool:
    return key is None or len(key) < 1


@dataclass
class Table:
    """String -> frequency table using open addressing with linear probing.

    Deleted entries leave a Tombstone behind, which keeps probe sequences
    running through the slot and still counts towards the load factor.
    `occupied_count` is live entries plus tombstones; the table is rebuilt
    into the next prime above double its capacity once that exceeds
    TABLE_MAX_LOAD.

    `collisions` tallies pairs of distinct live keys that share a home bucket.
    """

    slots: list[Slot]
    live_count: int
    occupied_count: int
    collisions: int

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, hash_func: HashFunc = horner_hash
    ) -> None:
        if capacity < 1:
            raise InvalidArgument(f"Initial capacity cannot be less than one: {capacity}")

        self._hash_func = hash_func
        self._resizing = False
        self._reset(capacity)

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def load_factor(self) -> float:
        return self.occupied_count / self.capacity

    def insert(self, key: str | None):
        if _is_blank(key):
            return

        found = self.search(key)
        if not isinstance(found, NotFound):
            slot = self.slots[found]
            assert isinstance(slot, Occupied)
            slot.frequency += 1
            return

        # counted before the key is placed, so it never collides with itself
        new_collisions = self.count_collisions(key)

        index = self._find_free(key)
        if isinstance(self.slots[index], Empty):
            self.occupied_count += 1
        self.slots[index] = Occupied(key, 1)
        self.live_count += 1
        self.collisions += new_collisions

        if not self._resizing and self.load_factor() > TABLE_MAX_LOAD:
            self.resize()

    def remove(self, key: str | None) -> str | NotFound:
        if _is_blank(key):
            return NotFound()

        found = self.search(key)
        if isinstance(found, NotFound):
            return found

        slot = self.slots[found]
        assert isinstance(slot, Occupied)
        if slot.frequency > 1:
            slot.frequency -= 1
            return slot.key

        # tombstone stays occupied, occupied_count is untouched
        lost_collisions = self.count_collisions(key)
        self.slots[found] = Tombstone()
        self.live_count -= 1
        self.collisions -= lost_collisions
        return slot.key

    def add_all(self, from_t: "Table"):
        for key, frequency in list(from_t.items()):
            for _ in range(frequency):
                self.insert(key)

    def size(self) -> int:
        return self.live_count

    def contains(self, key: str | None) -> bool:
        if _is_blank(key):
            return False
        return not isinstance(self.search(key), NotFound)

    def frequency_of(self, key: str | None) -> int:
        if _is_blank(key):
            return 0

        found = self.search(key)
        if isinstance(found, NotFound):
            return 0

        slot = self.slots[found]
        assert isinstance(slot, Occupied)
        return slot.frequency

    def collision_count(self) -> int:
        return self.collisions

    def hash_of(self, key: str | None) -> int:
        if _is_blank(key):
            return INVALID_HASH
        return self._hash(key)

    def items(self) -> Iterator[tuple[str, int]]:
        for slot in self.slots:
            if isinstance(slot, Occupied):
                yield slot.key, slot.frequency

    def display(self) -> str:
        return "Table: " + "".join(f"{slot} " for slot in self.slots)

    def _hash(self, key: str) -> int:
        return self._hash_func(key, self.capacity)

    def search(self, key: str | None) -> int | NotFound:
        if _is_blank(key):
            return NotFound()

        index = self._hash(key)

        for _ in range(self.capacity):
            slot = self.slots[index]
            match slot:
                case Empty():
                    return NotFound()
                case Occupied() if slot.key == key:
                    return index

            index = (index + 1) % self.capacity

        return NotFound()

    def count_collisions(self, key: str | None) -> int:
        if _is_blank(key):
            return 0

        home = self._hash(key)
        index = home
        count = 0

        for _ in range(self.capacity):
            slot = self.slots[index]
            match slot:
                case Empty():
                    break
                case Occupied() if slot.key != key and self._hash(slot.key) == home:
                    count += 1

            index = (index + 1) % self.capacity

        return count

    def _find_free(self, key: str) -> int:
        index = self._hash(key)

        for _ in range(self.capacity):
            if not isinstance(self.slots[index], Occupied):
                return index
            index = (index + 1) % self.capacity

        raise RuntimeError(f"no free slot for {key!r} in table of {self.capacity}")

    def resize(self):
        old_slots = self.slots
        capacity = next_prime(self.capacity * 2 + 1)

        if _debug_trace_resize:
            printf("Rehashing {0:d} items, new size is {1:d}\n", self.live_count, capacity)

        self._reset(capacity)

        self._resizing = True
        try:
            for slot in old_slots:
                if not isinstance(slot, Occupied):
                    continue
                for _ in range(slot.frequency):
                    self.insert(slot.key)
        finally:
            self._resizing = False

    def _reset(self, capacity: int):
        self.slots = [Empty() for _ in range(capacity)]
        self.live_count = 0
        self.occupied_count = 0
        self.collisions = 0
