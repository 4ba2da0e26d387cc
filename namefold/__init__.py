# namefold Package
from namefold.fold_table import FoldOutcome, classify
from namefold.name_builder import NameBuilder, normalize_name
from namefold.path_change import PathChange, DRY_RUN_ERROR
from namefold.path_renamer import PathRenamer, clean_path
from namefold.tree_walker import TreeWalker, clean_directory
from namefold.result_collector import ResultCollector, FoldSummary
from namefold.fold_runner import FoldRunner, run_fold
from namefold.fold_logger import FoldLogger
from namefold.version import __version__

__all__ = [
    'FoldOutcome',
    'classify',
    'NameBuilder',
    'normalize_name',
    'PathChange',
    'DRY_RUN_ERROR',
    'PathRenamer',
    'clean_path',
    'TreeWalker',
    'clean_directory',
    'ResultCollector',
    'FoldSummary',
    'FoldRunner',
    'run_fold',
    'FoldLogger',
    '__version__'
]
