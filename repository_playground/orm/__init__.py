"""
This orm module contains the ORM (Object-Relational Mapping) models connecting to the PostgreSQL
database used in repository-playground.
It contains the Customer/Order/OrderItem models, repositories, the Unit of Work, services,
and database connection utilities.
"""
