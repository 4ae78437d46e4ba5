"""Products API (GraphQL)."""

from shiphero.http import ShipHeroGraphQLClient
from shiphero.logging_config import get_logger
from shiphero.models import (
    CreateProductRequest,
    DeleteResult,
    Product,
    ShipHeroModel,
    UpdateProductRequest,
)

from .base import require_result
from .queries import (
    CREATE_PRODUCT_MUTATION,
    DELETE_PRODUCT_MUTATION,
    PRODUCT_BY_SKU_QUERY,
    PRODUCT_QUERY,
    PRODUCTS_QUERY,
    UPDATE_PRODUCT_MUTATION,
)

logger = get_logger(__name__)


# Shapes of the GraphQL ``data`` field for each operation
class ProductsData(ShipHeroModel):
    products: list[Product] | None = None


class ProductData(ShipHeroModel):
    product: Product | None = None


class ProductBySkuData(ShipHeroModel):
    product_by_sku: Product | None = None


class CreateProductData(ShipHeroModel):
    create_product: Product | None = None


class UpdateProductData(ShipHeroModel):
    update_product: Product | None = None


class DeleteProductData(ShipHeroModel):
    delete_product: DeleteResult | None = None


class ProductsApi:
    """Product catalogue operations, served by the GraphQL endpoint."""

    def __init__(self, client: ShipHeroGraphQLClient):
        self._client = client

    def get_all(self) -> list[Product]:
        logger.info("Getting all products")
        data = self._client.execute_query(PRODUCTS_QUERY, response_type=ProductsData)
        return data.products or []

    def get_by_id(self, product_id: str) -> Product | None:
        logger.info("Getting product by ID", extra={"product_id": product_id})
        data = self._client.execute_query(
            PRODUCT_QUERY, {"id": product_id}, response_type=ProductData
        )
        return data.product

    def get_by_sku(self, sku: str) -> Product | None:
        logger.info("Getting product by SKU", extra={"sku": sku})
        data = self._client.execute_query(
            PRODUCT_BY_SKU_QUERY, {"sku": sku}, response_type=ProductBySkuData
        )
        return data.product_by_sku

    def create(self, request: CreateProductRequest) -> Product:
        """Create a product.

        Raises:
            ShipHeroError: If the mutation returns no product.
        """
        logger.info("Creating product", extra={"sku": request.sku})
        data = self._client.execute_mutation(
            CREATE_PRODUCT_MUTATION,
            {"input": request.to_payload()},
            response_type=CreateProductData,
        )
        return require_result(data.create_product, "create product")

    def update(self, product_id: str, request: UpdateProductRequest) -> Product:
        logger.info("Updating product", extra={"product_id": product_id})
        data = self._client.execute_mutation(
            UPDATE_PRODUCT_MUTATION,
            {"id": product_id, "input": request.to_payload()},
            response_type=UpdateProductData,
        )
        return require_result(data.update_product, "update product")

    def delete(self, product_id: str) -> None:
        logger.info("Deleting product", extra={"product_id": product_id})
        self._client.execute_mutation(
            DELETE_PRODUCT_MUTATION,
            {"id": product_id},
            response_type=DeleteProductData,
        )
