"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Each
action declares its request rules with ``validate_request``; domain
exceptions are caught and translated into HTTP status codes.  Anything
else propagates to ``api_exception_handler``.

Every successful response is wrapped as ``{"data": ...}``.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    OpenApiTypes,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import (
    format_pydantic_errors,
    validate_request,
    validation_error_response,
)
from modules.products.constants import PRODUCT_DELETED, PRODUCT_NOT_FOUND
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductCreateRules,
    ProductIdRules,
    ProductReplaceRules,
    ProductSerializer,
)
from modules.products.services import ProductService

# ---------------------------------------------------------------------------
# OpenAPI documentation helpers
# ---------------------------------------------------------------------------

_ID_PARAMETER = OpenApiParameter(
    name="id",
    type=OpenApiTypes.INT,
    location=OpenApiParameter.PATH,
    description="The ID of the product to retrieve",
)

_PRODUCT_RESPONSE = inline_serializer(
    name="ProductResponse",
    fields={"data": ProductSerializer()},
)

_PRODUCT_LIST_RESPONSE = inline_serializer(
    name="ProductListResponse",
    fields={"data": ProductSerializer(many=True)},
)

_NOT_FOUND = OpenApiResponse(description="Product not found")
_BAD_REQUEST = OpenApiResponse(description="Bad Request - Invalid ID or Invalid input data")


def _product_request(name: str, with_availability: bool) -> serializers.Serializer:
    fields = {
        "name": serializers.CharField(help_text="Monitor Curvo de 49 pulgadas"),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
    }
    if with_availability:
        fields["availability"] = serializers.BooleanField()
    return inline_serializer(name=name, fields=fields)


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        description="Return a list of products",
        responses={200: _PRODUCT_LIST_RESPONSE},
    ),
    retrieve=extend_schema(
        summary="Get a product by id",
        description="Return a product based on its unique ID",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_RESPONSE, 400: _BAD_REQUEST, 404: _NOT_FOUND},
    ),
    create=extend_schema(
        summary="Creates a new product",
        description="Returns a new record in the database",
        request=_product_request("ProductCreateRequest", with_availability=False),
        responses={201: _PRODUCT_RESPONSE, 400: _BAD_REQUEST},
    ),
    update=extend_schema(
        summary="Updates a product with user input",
        description="Returns the updated product",
        parameters=[_ID_PARAMETER],
        request=_product_request("ProductReplaceRequest", with_availability=True),
        responses={200: _PRODUCT_RESPONSE, 400: _BAD_REQUEST, 404: _NOT_FOUND},
    ),
    partial_update=extend_schema(
        summary="Update Product availability",
        description="Returns the updated availability",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: _PRODUCT_RESPONSE, 400: _BAD_REQUEST, 404: _NOT_FOUND},
    ),
    destroy=extend_schema(
        summary="Deletes a Product by a given ID",
        description="Returns a confirmation message",
        parameters=[_ID_PARAMETER],
        responses={
            200: inline_serializer(
                name="ProductDeletedResponse",
                fields={"data": serializers.CharField(default=PRODUCT_DELETED)},
            ),
            400: _BAD_REQUEST,
            404: _NOT_FOUND,
        },
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet`` — all ORM access goes through
    the service/repository layer.
    """

    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend]
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_queryset(self):
        return self._service.list_products()

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"error": PRODUCT_NOT_FOUND},
            status=status.HTTP_404_NOT_FOUND,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self.filter_queryset(self.get_queryset())
        return Response({"data": ProductSerializer(products, many=True).data})

    @validate_request(params=ProductIdRules)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @validate_request(body=ProductCreateRules)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data

        try:
            dto = CreateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability", True),
            )
        except PydanticValidationError as exc:
            return validation_error_response(format_pydantic_errors(exc))

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate_request(params=ProductIdRules, body=ProductReplaceRules)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        data = request.data

        try:
            dto = ReplaceProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return validation_error_response(format_pydantic_errors(exc))

        try:
            product = self._service.replace_product(pk, dto)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(params=ProductIdRules)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}

        Toggles ``availability``; the request body is ignored.
        """
        try:
            product = self._service.toggle_availability(pk)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(params=ProductIdRules)
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": PRODUCT_DELETED})
