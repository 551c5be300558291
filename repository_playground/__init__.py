"""repository-playground: Customer / Order / OrderItem on PostgreSQL with SQLAlchemy."""
