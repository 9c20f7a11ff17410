"""util package.

Modules:
    - utility_scripts: Functions generating the Bitcoin Script snippets used by circuit verifiers (pick, push
    and drop stack elements).
"""
