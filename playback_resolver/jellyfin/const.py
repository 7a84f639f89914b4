"""Constants for the Jellyfin transport."""

from typing import Final

# Config keys
CONF_URL: Final = "url"
CONF_API_TOKEN: Final = "api_token"
CONF_USER_ID: Final = "user_id"
CONF_DEVICE_ID: Final = "device_id"
CONF_DEVICE_NAME: Final = "device_name"
CONF_CLIENT_NAME: Final = "client_name"
CONF_VERIFY_SSL: Final = "verify_ssl"
CONF_REQUEST_TIMEOUT: Final = "request_timeout"
CONF_STRIP_SOURCE_ID_SEPARATORS: Final = "strip_source_id_separators"

# Endpoints
ENDPOINT_PLAYBACK_INFO: Final = "Items/{item_id}/PlaybackInfo"
ENDPOINT_USER_ITEM: Final = "Users/{user_id}/Items/{item_id}"

HEADER_AUTHORIZATION: Final = "Authorization"

# PlaybackInfoResponse
RESPONSE_KEY_PLAY_SESSION_ID: Final = "PlaySessionId"
RESPONSE_KEY_MEDIA_SOURCES: Final = "MediaSources"
RESPONSE_KEY_ERROR_CODE: Final = "ErrorCode"

# MediaSourceInfo
SOURCE_KEY_ID: Final = "Id"
SOURCE_KEY_LIVE_STREAM_ID: Final = "LiveStreamId"
SOURCE_KEY_NAME: Final = "Name"
SOURCE_KEY_PROTOCOL: Final = "Protocol"
SOURCE_KEY_CONTAINER: Final = "Container"
SOURCE_KEY_PATH: Final = "Path"
SOURCE_KEY_RUN_TIME_TICKS: Final = "RunTimeTicks"
SOURCE_KEY_BITRATE: Final = "Bitrate"
SOURCE_KEY_IS_REMOTE: Final = "IsRemote"
SOURCE_KEY_SUPPORTS_DIRECT_PLAY: Final = "SupportsDirectPlay"
SOURCE_KEY_SUPPORTS_DIRECT_STREAM: Final = "SupportsDirectStream"
SOURCE_KEY_SUPPORTS_TRANSCODING: Final = "SupportsTranscoding"
SOURCE_KEY_TRANSCODING_URL: Final = "TranscodingUrl"
SOURCE_KEY_DEFAULT_AUDIO_STREAM_INDEX: Final = "DefaultAudioStreamIndex"
SOURCE_KEY_DEFAULT_SUBTITLE_STREAM_INDEX: Final = "DefaultSubtitleStreamIndex"
SOURCE_KEY_MEDIA_STREAMS: Final = "MediaStreams"

# MediaStream
STREAM_KEY_INDEX: Final = "Index"
STREAM_KEY_TYPE: Final = "Type"
STREAM_KEY_CODEC: Final = "Codec"
STREAM_KEY_LANGUAGE: Final = "Language"
STREAM_KEY_DISPLAY_TITLE: Final = "DisplayTitle"
STREAM_KEY_IS_DEFAULT: Final = "IsDefault"
STREAM_KEY_IS_FORCED: Final = "IsForced"
STREAM_KEY_IS_EXTERNAL: Final = "IsExternal"
STREAM_KEY_CHANNELS: Final = "Channels"
STREAM_KEY_SAMPLE_RATE: Final = "SampleRate"
STREAM_KEY_BIT_RATE: Final = "BitRate"
STREAM_KEY_WIDTH: Final = "Width"
STREAM_KEY_HEIGHT: Final = "Height"
STREAM_KEY_DELIVERY_URL: Final = "DeliveryUrl"

# BaseItemDto
ITEM_KEY_ID: Final = "Id"
ITEM_KEY_NAME: Final = "Name"
ITEM_KEY_TYPE: Final = "Type"
ITEM_KEY_OVERVIEW: Final = "Overview"
ITEM_KEY_SERIES_NAME: Final = "SeriesName"
ITEM_KEY_PARENT_INDEX_NUMBER: Final = "ParentIndexNumber"
ITEM_KEY_INDEX_NUMBER: Final = "IndexNumber"
ITEM_KEY_PRODUCTION_YEAR: Final = "ProductionYear"
ITEM_KEY_RUN_TIME_TICKS: Final = "RunTimeTicks"
ITEM_KEY_IMAGE_TAGS: Final = "ImageTags"
ITEM_KEY_GENRES: Final = "Genres"

IMAGE_TYPE_PRIMARY: Final = "Primary"
