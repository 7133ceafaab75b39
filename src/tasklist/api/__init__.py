"""
Transport adapters.

- graphql_schema.py: graphene schema (tasks / createTask / toggleTask)
- http_controller.py: Flask blueprint with JSON task routes
- app.py: Flask app factory mounting both
"""
