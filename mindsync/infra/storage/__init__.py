"""Durable local state storage"""
from .state_store import StateStore, FileStateStore, InMemoryStateStore

__all__ = ['StateStore', 'FileStateStore', 'InMemoryStateStore']
