"""
Tortoise ORM models for the users API
"""
from tortoise.models import Model
from tortoise import fields
from uuid import uuid4


class User(Model):
    id = fields.CharField(max_length=36, pk=True, default=lambda: str(uuid4()))
    name = fields.CharField(max_length=255)
    login = fields.CharField(max_length=255, unique=True)
    password = fields.CharField(max_length=255)

    class Meta:
        table = "users"
