from pydantic import BaseModel, Field


class Thumbnail(BaseModel):
    url: str | None = None
    width: int | None = None
    height: int | None = None


class ChannelRef(BaseModel):
    name: str | None = None
    id: str | None = None
    url: str | None = None


class Duration(BaseModel):
    text: str | None = None
    pretty: str | None = None


class Published(BaseModel):
    pretty: str | None = None


class Views(BaseModel):
    text: str | None = None
    pretty: str | None = None
    pretty_long: str | None = None


class Subscribers(BaseModel):
    text: str | None = None
    pretty: str | None = None


class VideoRecord(BaseModel):
    title: str | None = None
    id: str | None = None
    url: str | None = None
    channel: ChannelRef = Field(default_factory=ChannelRef)
    duration: Duration = Field(default_factory=Duration)
    published: Published = Field(default_factory=Published)
    views: Views = Field(default_factory=Views)
    thumbnails: list[Thumbnail] | None = None


class ChannelRecord(BaseModel):
    name: str | None = None
    id: str | None = None
    url: str | None = None
    subscribers: Subscribers = Field(default_factory=Subscribers)
    icons: list[Thumbnail] | None = None
    badges: list[str] = []


class PlaylistRecord(BaseModel):
    name: str | None = None
    id: str | None = None
    url: str | None = None
    thumbnails: list[Thumbnail] | None = None
    video_count: str | None = None
    published: Published = Field(default_factory=Published)


class SearchResult(BaseModel):
    videos: list[VideoRecord] = []
    channels: list[ChannelRecord] = []
    playlists: list[PlaylistRecord] = []
    unique_channel_ids: set[str] = set()

    def add(self, record: VideoRecord | ChannelRecord | PlaylistRecord) -> None:
        if isinstance(record, VideoRecord):
            self.videos.append(record)
        elif isinstance(record, ChannelRecord):
            self.channels.append(record)
        elif isinstance(record, PlaylistRecord):
            self.playlists.append(record)

    def recompute_unique_channel_ids(self) -> set[str]:
        """Rebuild unique_channel_ids from every accumulated channel and video owner.

        Records whose channel id is missing do not count.
        """
        ids = {channel.id for channel in self.channels if channel.id}
        ids.update(video.channel.id for video in self.videos if video.channel.id)
        self.unique_channel_ids = ids
        return ids


class RequestOptions(BaseModel):
    headers: dict[str, str] = {}
    timeout: float | None = None
    proxies: dict[str, str] | None = None


class SearchOptions(BaseModel):
    request_options: RequestOptions = Field(default_factory=RequestOptions)
    # Unknown filter names are accepted and ignored.
    filter_type: str | None = None
    # Attach the pages gathered so far to a mid-search SearchError instead of discarding them.
    partial_on_error: bool = False
