from collections import deque

from maze_env.board import board_width, is_wall
from maze_env.movement import DIRECTIONS, manhattan, next_position

# ======================================================================
#  SEARCH PROBLEM (grid mapping)
# ======================================================================
class GhostChaseProblem:
    """
    Search problem for a ghost hunting the muncher.

    States are grid positions, every move costs 1 and only true walls
    block the way: ghost-house tiles are ordinary cells here, the
    egress rule is applied by the caller on the first step.
    """
    def __init__(self, initial, goal, board):
        self.initial = tuple(initial)
        self.goal = tuple(goal)
        self.board = board
        self.width = board_width(board)

    def actions(self, state):
        return [d for d in DIRECTIONS if not is_wall(self.board, self.result(state, d))]

    def result(self, state, action):
        # Túnel: next_position already wraps x at the board edges
        return tuple(next_position(state, action, self.width))

    def goal_test(self, state):
        return tuple(state) == self.goal

    def path_cost(self, c, state1, action, state2):
        return c + 1

    def h(self, state):
        return manhattan(state, self.goal)


def breadth_first_search(problem):
    """
    Plain FIFO breadth-first search.

    Returns the list of actions of one shortest path from
    ``problem.initial`` to the goal, ``[]`` when already there, or
    ``None`` when the goal is unreachable.
    """
    start = problem.initial
    if problem.goal_test(start):
        return []

    parents = {start: None}
    frontier = deque([start])
    while frontier:
        state = frontier.popleft()
        for action in problem.actions(state):
            child = problem.result(state, action)
            if child in parents:
                continue
            parents[child] = (state, action)
            if problem.goal_test(child):
                return _solution(parents, child)
            frontier.append(child)
    return None


def _solution(parents, state):
    path = []
    while parents[state] is not None:
        state, action = parents[state]
        path.append(action)
    path.reverse()
    return path


def shortest_path_move(board, start, goal):
    """First step of a shortest path from ``start`` to ``goal``, or None."""
    path = breadth_first_search(GhostChaseProblem(start, goal, board))
    if not path:
        return None
    return path[0]
