from urlview.services.image_fetcher import ImageFetcher, ImageFetchError

__all__ = ["ImageFetcher", "ImageFetchError"]
