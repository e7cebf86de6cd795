"""
Django ORM models for persistence.
Infrastructure layer — technical storage detail.
"""

from django.db import models


class BeerRecord(models.Model):

    # Ids are assigned by the client, never generated.
    id = models.BigIntegerField(primary_key=True)
    name = models.CharField(max_length=45)
    brewery = models.CharField(max_length=45)
    country = models.CharField(max_length=45)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    currency = models.CharField(max_length=32)

    class Meta:
        db_table = "beer"
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.brewery}) | {self.price} {self.currency}"
