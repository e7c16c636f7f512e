"""HAPI routes - human readable verb-phrase URLs.

More about the convention at https://github.com/jheising/HAPI
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from datayoinker.application.api.v1.routes.params import collect_params
from datayoinker.application.api.v1.schemas import YoinkResponse
from datayoinker.domain.yoink.command.publish import PublishYoink, PublishYoinkHandler
from datayoinker.domain.yoink.query.get_all import GetAllYoinks, GetAllYoinksHandler
from datayoinker.domain.yoink.query.get_last import GetLastYoinks, GetLastYoinksHandler
from datayoinker.domain.yoink.query.get_latest import GetLatestYoink, GetLatestYoinkHandler

router = APIRouter(tags=["HAPI"], route_class=DishkaRoute)


@router.get("/publish/yoink/for/{topic}", response_model=YoinkResponse)
async def publish_for_topic(
    topic: str,
    request: Request,
    handler: FromDishka[PublishYoinkHandler],
) -> YoinkResponse:
    """Store the query parameters as a new yoink for the topic."""
    params = await collect_params(request)
    yoink = await handler.run(PublishYoink(topic=topic, params=params))
    return YoinkResponse.from_domain(yoink)


@router.get("/get/latest/yoink/from/{topic}", response_model=YoinkResponse)
async def get_latest_yoink_from_topic(
    topic: str,
    handler: FromDishka[GetLatestYoinkHandler],
) -> YoinkResponse:
    return YoinkResponse.from_domain(await handler.run(GetLatestYoink(topic=topic)))


@router.get("/get/last/{number}/yoinks/from/{topic}", response_model=list[YoinkResponse])
@router.get("/get/{number}/last/yoinks/from/{topic}", response_model=list[YoinkResponse])
@router.get("/get/latest/{number}/yoinks/from/{topic}", response_model=list[YoinkResponse])
@router.get("/get/{number}/latest/yoinks/from/{topic}", response_model=list[YoinkResponse])
async def get_last_number_of_yoinks_from_topic(
    number: str,
    topic: str,
    handler: FromDishka[GetLastYoinksHandler],
) -> list[YoinkResponse]:
    yoinks = await handler.run(GetLastYoinks(topic=topic, number=number))
    return YoinkResponse.many(yoinks)


@router.get("/get/all/yoinks/from/{topic}", response_model=list[YoinkResponse])
async def get_all_yoinks_from_topic(
    topic: str,
    handler: FromDishka[GetAllYoinksHandler],
) -> list[YoinkResponse]:
    return YoinkResponse.many(await handler.run(GetAllYoinks(topic=topic)))
