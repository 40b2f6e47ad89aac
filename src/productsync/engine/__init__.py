from productsync.engine.synchronizer import Synchronizer

__all__ = ["Synchronizer"]
