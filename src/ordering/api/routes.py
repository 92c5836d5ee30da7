"""FastAPI routes for the Ordering domain — version 1 of the Order API.

A later API version can change request or response shapes under a new
prefix while clients of `/v1` keep working.
"""

from fastapi import APIRouter, Depends, Request, Response

from ordering.api.schemas import OrderDetailResponse, OrderRequest, ResourceResponse
from ordering.order.service import OrderService

order_router = APIRouter(prefix="/v1/order", tags=["orders"])


def get_order_service(request: Request) -> OrderService:
    """The service instance built at startup and kept on the application state."""
    return request.app.state.order_service


@order_router.head("/")
async def ping() -> Response:
    return Response(status_code=200)


@order_router.post("/", status_code=201, response_model=ResourceResponse)
async def create_order(
    body: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> ResourceResponse:
    order_id = service.create_order(
        customer_name=body.customer_name,
        products=body.products,
    )
    return ResourceResponse(status=201, message="Order Created Successfully!", resourceId=order_id)


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def fetch_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderDetailResponse:
    line_items = service.fetch_order(order_id)
    return OrderDetailResponse(status=200, message="Order Details Fetched Successfully!", order=line_items)


@order_router.put("/{order_id}", response_model=ResourceResponse)
async def update_order(
    order_id: str,
    body: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> ResourceResponse:
    updated_id = service.update_order(
        order_id=order_id,
        customer_name=body.customer_name,
        products=body.products,
    )
    return ResourceResponse(status=200, message="Order Updated Successfully!", resourceId=updated_id)
