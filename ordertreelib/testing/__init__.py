"""Testing helpers for projects that build on OrderTreeLib."""

from .fixtures import TreeStructureHelper

__all__ = ['TreeStructureHelper']
