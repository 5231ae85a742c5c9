"""
Zen: a small dynamically-typed scripting language with a tree-walking interpreter.
"""
