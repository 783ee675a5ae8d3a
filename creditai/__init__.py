"""
CreditAI Gateway - Alternative Credit Scoring Service

A FastAPI-based service that scores borrowers from a short financial
questionnaire, explains the score, and serves the portfolio datasets
behind the CreditAI dashboard.
"""

__version__ = "0.1.0"
