"""REST routes - resource oriented URLs over the same operations as HAPI."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from datayoinker.application.api.v1.routes.params import collect_params
from datayoinker.application.api.v1.schemas import YoinkResponse
from datayoinker.domain.yoink.command.publish import PublishYoink, PublishYoinkHandler
from datayoinker.domain.yoink.query.get_all import GetAllYoinks, GetAllYoinksHandler
from datayoinker.domain.yoink.query.get_last import GetLastYoinks, GetLastYoinksHandler
from datayoinker.domain.yoink.query.get_latest import GetLatestYoink, GetLatestYoinkHandler

router = APIRouter(tags=["REST"], route_class=DishkaRoute)


@router.post("/yoink/{topic}", response_model=YoinkResponse)
async def create_yoink(
    topic: str,
    request: Request,
    handler: FromDishka[PublishYoinkHandler],
) -> YoinkResponse:
    """Store the query string and form fields as a new yoink."""
    params = await collect_params(request)
    yoink = await handler.run(PublishYoink(topic=topic, params=params))
    return YoinkResponse.from_domain(yoink)


@router.get("/yoink/{topic}", response_model=YoinkResponse)
async def get_latest_yoink(
    topic: str,
    handler: FromDishka[GetLatestYoinkHandler],
) -> YoinkResponse:
    return YoinkResponse.from_domain(await handler.run(GetLatestYoink(topic=topic)))


@router.get("/yoinks/{topic}/{number}", response_model=list[YoinkResponse])
async def get_last_yoinks(
    topic: str,
    number: str,
    handler: FromDishka[GetLastYoinksHandler],
) -> list[YoinkResponse]:
    yoinks = await handler.run(GetLastYoinks(topic=topic, number=number))
    return YoinkResponse.many(yoinks)


@router.get("/yoinks/{topic}", response_model=list[YoinkResponse])
async def get_all_yoinks(
    topic: str,
    handler: FromDishka[GetAllYoinksHandler],
) -> list[YoinkResponse]:
    return YoinkResponse.many(await handler.run(GetAllYoinks(topic=topic)))
