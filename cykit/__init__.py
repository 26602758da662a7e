"""
CYK membership for context-free grammars in Chomsky Normal Form.
"""
