"""Game engine components.

- EncryptionEngine: word, secret shift and guess comparison (cipher.py)
- RoundController: round lifecycle and statistics (round.py)
- Validators: word and guess input checks (validators/)

Import directly from submodules:
    from shiftgame.engine.cipher import EncryptionEngine
    from shiftgame.engine.round import RoundController
"""
