"""
Unit tests for fitness score API components.

DynamoDB is mocked with moto or replaced by test doubles; no test talks to AWS.
"""
