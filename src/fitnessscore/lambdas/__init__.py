"""
AWS Lambda functions for the fitness score API.

Modules:
    fitness_score_get: Handles GET /fitness range queries
    fitness_score_store: Handles POST /fitness writes
"""

# Lambda function entry points are imported directly from their modules
