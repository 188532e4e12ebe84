from .rewriter import backup_path, order_by_elapsed, rewrite_by_elapsed
from .types import HistoryRewriteError

__all__ = [
    "rewrite_by_elapsed",
    "order_by_elapsed",
    "backup_path",
    "HistoryRewriteError",
]
