"""
PassForge -- Password Toolkit
==============================

Interactive command-line toolkit for password strength assessment,
secure password generation, brute-force crack-time estimation and
ASCII banner rendering.

Modules:
    - passforge.analyzers: Classifier, scorer, generator, estimator
    - passforge.core: Engine facade, pydantic models, exceptions
    - passforge.output: Rich console renderers
    - passforge.menu: Interactive menu loop
    - passforge.terminal: No-echo password input
    - passforge.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

__version__ = "1.0.0"
