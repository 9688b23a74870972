"""
Shift Game Test Suite

Test structure:
- unit/: Test components in isolation with fixed shift sources
- integration/: Console sessions and CLI driven end to end
- mocks/: Deterministic shift sources and console I/O
"""
