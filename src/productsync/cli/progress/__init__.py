from productsync.cli.progress.rich import RichFeedback

__all__ = ["RichFeedback"]
