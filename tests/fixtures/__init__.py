"""
Test fixtures package for vcard_builder tests.

Provides sample serialized cards and generator functions that build
populated VCard instances.
"""
