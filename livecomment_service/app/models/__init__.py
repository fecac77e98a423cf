from .base import Base
from .user import User, Theme, Icon
from .livestream import Livestream, Tag, LivestreamTag
from .livecomment import Livecomment, LivecommentReport
from .ng_word import NGWord
