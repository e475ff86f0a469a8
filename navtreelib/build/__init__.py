"""Utilities that build trees for navigation."""

from .hierarchical import HierarchicalTreeFactory, TypeNameTreeFactory

__all__ = ['HierarchicalTreeFactory', 'TypeNameTreeFactory']
