# config Package
from config.fold_config import FoldConfig

__all__ = ['FoldConfig']
