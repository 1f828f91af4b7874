"""
Card Gateway - Credit-Card Application Decision Service

Evaluates credit-card applications against the card issuer's business
rules, consulting a frequent-flyer number validator and an optional
fraud screener.
"""

__version__ = "0.1.0"
