"""Carve a grid maze with Kruskal's algorithm and walk it with Dijkstra."""

from __future__ import annotations

import numpy as np

from weightedgraph import Graph, total_weight

Room = tuple[int, int]


class Wall:
    """Wall between two adjacent rooms. Its distance can be overridden while carving."""

    def __init__(self, room1: Room, room2: Room, distance: float = 1.0) -> None:
        self.vertex1 = room1
        self.vertex2 = room2
        self._original = distance
        self.weight = distance

    def set_distance(self, distance: float) -> None:
        self.weight = distance

    def reset_distance_to_original(self) -> None:
        self.weight = self._original

    def other_vertex(self, room: Room) -> Room:
        if room == self.vertex1:
            return self.vertex2
        if room == self.vertex2:
            return self.vertex1
        raise ValueError(f"{room!r} is not next to {self!r}")

    def __lt__(self, other: Wall) -> bool:
        return (self.weight, self.vertex1, self.vertex2) < (other.weight, other.vertex1, other.vertex2)

    def __repr__(self) -> str:
        return f"Wall({self.vertex1}, {self.vertex2})"


def make_grid(rows: int, cols: int) -> tuple[list[Room], list[Wall]]:
    rooms = [(r, c) for r in range(rows) for c in range(cols)]
    walls = []
    for r, c in rooms:
        if c + 1 < cols:
            walls.append(Wall((r, c), (r, c + 1)))
        if r + 1 < rows:
            walls.append(Wall((r, c), (r + 1, c)))
    return rooms, walls


def walls_to_remove(rooms: list[Room], walls: list[Wall], seed: int = 0) -> set[Wall]:
    rng = np.random.default_rng(seed)
    for wall, distance in zip(walls, rng.random(len(walls))):
        wall.set_distance(float(distance))
    removed = Graph(rooms, walls).find_minimum_spanning_tree()
    for wall in walls:
        wall.reset_distance_to_original()
    return removed


def render(rows: int, cols: int, removed: set[Wall], route: set[Room]) -> str:
    open_pairs = {(w.vertex1, w.vertex2) for w in removed} | {(w.vertex2, w.vertex1) for w in removed}
    lines = ["+" + "---+" * cols]
    for r in range(rows):
        cells = "|"
        floor = "+"
        for c in range(cols):
            cells += " * " if (r, c) in route else "   "
            cells += " " if ((r, c), (r, c + 1)) in open_pairs else "|"
            floor += "   +" if ((r, c), (r + 1, c)) in open_pairs else "---+"
        lines.extend([cells, floor])
    return "\n".join(lines)


def main() -> None:
    rows, cols = 6, 10
    rooms, walls = make_grid(rows, cols)
    removed = walls_to_remove(rooms, walls)
    carved = Graph(rooms, removed)
    path = carved.find_shortest_path_between((0, 0), (rows - 1, cols - 1))
    route = {(0, 0)}
    current = (0, 0)
    for wall in path:
        current = wall.other_vertex(current)
        route.add(current)
    print(render(rows, cols, removed, route))
    print(f"Walls removed: {len(removed)} of {len(walls)}")
    print(f"Route length: {total_weight(path):.0f} steps")


if __name__ == "__main__":
    main()
