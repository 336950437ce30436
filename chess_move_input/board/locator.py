"""Strategies for finding the board a typed move applies to.

A host may expose its board in several ways (a fixed object, a getter on
its current game, a FEN in configuration). Each way is one locator, and
ChainedBoardLocator tries them in priority order.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from loguru import logger

from chess_move_input.board.base_board import BaseBoard
from chess_move_input.board.python_chess_board import PythonChessBoard
from chess_move_input.config import load_env


class BaseBoardLocator(ABC):
    """Abstract source of the board currently in play."""

    @abstractmethod
    def current_board(self) -> BaseBoard | None:
        """Get the board currently in play.

        Returns:
            The board, or None if there is none.
        """
        pass


class StaticBoardLocator(BaseBoardLocator):
    """Always returns the same board (or None)."""

    def __init__(self, board: BaseBoard | None) -> None:
        self.board = board

    def current_board(self) -> BaseBoard | None:
        return self.board


class CallableBoardLocator(BaseBoardLocator):
    """Asks a host getter for the board on every lookup."""

    def __init__(self, get_board: Callable[[], BaseBoard | None]) -> None:
        """Initialize with a zero-argument getter.

        Args:
            get_board: Returns the host's current board or None.
        """
        self.get_board = get_board

    def current_board(self) -> BaseBoard | None:
        return self.get_board()


class FenBoardLocator(BaseBoardLocator):
    """Builds a python-chess board from a FEN held in an environment variable.

    Every lookup yields a fresh board, so executed moves are not remembered.
    """

    def __init__(self, env_var: str = "MOVE_INPUT_FEN") -> None:
        self.env_var = env_var

    def current_board(self) -> PythonChessBoard | None:
        load_env()
        fen = os.environ.get(self.env_var)
        if not fen:
            return None

        try:
            return PythonChessBoard.from_fen(fen)
        except ValueError as e:
            logger.warning(f"Ignoring invalid FEN in {self.env_var}: {e}")
            return None


class ChainedBoardLocator(BaseBoardLocator):
    """Tries locators in fixed priority order until one finds a board."""

    def __init__(self, locators: Sequence[BaseBoardLocator]) -> None:
        """Initialize with locators, highest priority first.

        Args:
            locators: Locators to try in order.
        """
        self.locators = list(locators)

    def current_board(self) -> BaseBoard | None:
        for locator in self.locators:
            board = locator.current_board()
            if board is not None:
                logger.debug(f"Board found by {locator.__class__.__name__}")
                return board
        return None
