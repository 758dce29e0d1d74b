"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from storefront.api.http.deps import get_product_service
from storefront.core.services import ProductService
from storefront.entities.product import Product, ProductCreate, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.get_all()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    product = service.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    created = service.add(payload)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=created.id)
    )
    return created


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Replace the mutable fields of a product."""
    if payload.id != product_id:
        raise HTTPException(
            status_code=400, detail="Path id does not match body id"
        )

    updated = service.update(Product.model_validate(payload.model_dump()))
    if updated is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return updated


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    if not service.delete(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
