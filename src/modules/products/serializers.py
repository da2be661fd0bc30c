"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Input goes through the Pydantic DTOs in ``dtos.py``; business rules
live in the Service Layer.  Image bytes are never inlined in JSON, the
``image_url`` points at the download endpoint instead.
"""

from __future__ import annotations

from typing import Optional

from rest_framework import serializers
from rest_framework.reverse import reverse

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "image_file_name",
            "image_content_type",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_image_url(self, obj: Product) -> Optional[str]:
        if not obj.has_image:
            return None
        return reverse(
            "product-image",
            kwargs={"pk": str(obj.id)},
            request=self.context.get("request"),
        )
