from sqlalchemy.orm import declarative_base

# Общая декларативная база. Доменные модели живут в tools/*/models.py
Base = declarative_base()
