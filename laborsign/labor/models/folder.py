from django.db import models
from .mixins import TimeStampedModel


class ContractFolder(TimeStampedModel):
    class Color(models.TextChoices):
        GRAY = "gray", "Gray"
        BLUE = "blue", "Blue"
        GREEN = "green", "Green"
        YELLOW = "yellow", "Yellow"
        PURPLE = "purple", "Purple"
        RED = "red", "Red"

    owner_id = models.IntegerField(db_index=True)
    name = models.CharField(max_length=60)
    color = models.CharField(max_length=10, choices=Color.choices, default=Color.GRAY)

    class Meta:
        ordering = ["created_at"]
        db_table = "ContractFolder"
        indexes = [models.Index(fields=["owner_id", "created_at"])]
        constraints = [
            models.CheckConstraint(name="folder_name_not_blank", condition=~models.Q(name="")),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_color_display()})"
