"""Core interfaces.

Contracts (Protocol) implemented by embedders and adapters, so the dispatch code
depends on abstractions rather than on concrete customizations.
"""
