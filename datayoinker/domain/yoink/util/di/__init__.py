from datayoinker.domain.yoink.util.di.provider import YoinkProvider

__all__ = ["YoinkProvider"]
