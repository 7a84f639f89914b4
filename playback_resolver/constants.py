"""All constants for the playback resolver."""

from typing import Final

APPLICATION_NAME: Final = "PlaybackResolver"
LOGGER_NAME: Final = "playback_resolver"

# logging below DEBUG for wire-level chatter
VERBOSE_LOG_LEVEL: Final = 5

# Jellyfin (and .NET) time values are expressed in 100 nanosecond ticks
TICKS_PER_MICROSECOND: Final[int] = 10
TICKS_PER_SECOND: Final[int] = 10_000_000

# stream index the server uses to express "subtitles disabled"
SUBTITLE_INDEX_DISABLED: Final[int] = -1

DEFAULT_REQUEST_TIMEOUT: Final[int] = 30
DEFAULT_CLIENT_NAME: Final = APPLICATION_NAME
DEFAULT_DEVICE_NAME: Final = "playback-resolver"

# PlaybackInfoDto, the body of a playback info request
DTO_KEY_USER_ID: Final = "UserId"
DTO_KEY_MEDIA_SOURCE_ID: Final = "MediaSourceId"
DTO_KEY_DEVICE_PROFILE: Final = "DeviceProfile"
DTO_KEY_MAX_STREAMING_BITRATE: Final = "MaxStreamingBitrate"
DTO_KEY_START_TIME_TICKS: Final = "StartTimeTicks"
DTO_KEY_AUDIO_STREAM_INDEX: Final = "AudioStreamIndex"
DTO_KEY_SUBTITLE_STREAM_INDEX: Final = "SubtitleStreamIndex"
DTO_KEY_AUTO_OPEN_LIVE_STREAM: Final = "AutoOpenLiveStream"
