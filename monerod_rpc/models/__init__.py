"""Public models for monerod call arguments."""

from monerod_rpc.models.daemon import BanEntry, BanList, BlockTemplateRequest

__all__ = ["BanEntry", "BanList", "BlockTemplateRequest"]
