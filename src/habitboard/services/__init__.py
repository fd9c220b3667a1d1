"""Domain services: the completion evaluator and the CRUD glue around it."""
