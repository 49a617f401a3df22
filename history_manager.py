"""
History Manager for PocketCalc
Keeps the list of completed operations, newest first
"""
import config
from formatting import format_number


class HistoryManager:
    def __init__(self, limit=config.MAX_HISTORY_ITEMS):
        self.limit = limit

    def format_calculation(self, lhs, operator, rhs, result):
        """Format one completed operation as '<lhs> <op> <rhs> = <result>'"""
        return f"{format_number(lhs)} {operator} {format_number(rhs)} = {format_number(result)}"

    def add_calculation(self, history, lhs, operator, rhs, result):
        """Return a new history with the operation added at the front"""
        entry = self.format_calculation(lhs, operator, rhs, result)
        return (entry,) + tuple(history[:self.limit - 1])

    def clear_calculation_history(self):
        """Return an empty history"""
        return ()

    def trim(self, entries):
        """Keep only string entries, at most `limit` of them"""
        return tuple(entry for entry in entries if isinstance(entry, str))[:self.limit]

    def format_calculation_history(self, history):
        """Format history for display, numbered from the newest"""
        return [f"{i}. {entry}" for i, entry in enumerate(history, 1)]
