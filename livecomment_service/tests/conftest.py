import os

os.environ.setdefault("ACCESS_TOKEN_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")

from datetime import datetime, timezone, timedelta
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from jose import jwt
from unittest.mock import AsyncMock
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from app.core.config import settings
from app.db.database import get_livecomment_db
from app.main import app
from app.models import (
    Base,
    User as UserModel,
    Theme as ThemeModel,
    Icon as IconModel,
    Livestream as LivestreamModel,
    Tag as TagModel,
    LivestreamTag as LivestreamTagModel,
    Livecomment as LivecommentModel,
)
from app.schemas.livecomment import (
    Livecomment as LivecommentSchema,
    LivecommentReport as LivecommentReportSchema,
)
from app.schemas.livestream import Livestream as LivestreamSchema, Tag as TagSchema
from app.schemas.user import User as UserSchema, Theme as ThemeSchema
from app.utils.token_utils import get_current_user_id


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_db():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture(autouse=True)
def override_db_dependency(mock_db):
    async def _override():
        yield mock_db
    app.dependency_overrides[get_livecomment_db] = _override
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def current_user_id():
    return 1


@pytest.fixture(autouse=True)
def override_user_dependency(current_user_id):
    async def _override():
        return current_user_id
    app.dependency_overrides[get_current_user_id] = _override
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def make_token():
    def _make_token(sub="1", expires_in: timedelta = timedelta(hours=1), **claims):
        payload = {"sub": sub, "exp": datetime.now(timezone.utc) + expires_in, **claims}
        return jwt.encode(payload, settings.access_token_secret_key, algorithm=settings.algorithm)
    return _make_token


@pytest_asyncio.fixture
async def sqlite_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return async_sessionmaker(sqlite_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def use_sqlite_db(session_factory):
    """Route the API's session dependency to the in-memory database."""
    async def _override():
        async with session_factory() as session:
            yield session
    app.dependency_overrides[get_livecomment_db] = _override
    yield


@pytest.fixture
def seed(session_factory):
    class _Seed:
        async def user(self, name: str, display_name: str | None = None, dark_mode=False, icon_hash=None):
            async with session_factory() as session:
                user = UserModel(
                    name=name,
                    display_name=display_name or name.capitalize(),
                    password="hash_password",
                    description=f"{name} description",
                )
                session.add(user)
                await session.flush()
                session.add(ThemeModel(user_id=user.id, dark_mode=dark_mode))
                if icon_hash:
                    session.add(IconModel(user_id=user.id, icon_hash=icon_hash))
                await session.commit()
                return user

        async def livestream(self, owner_id: int, title="Test livestream", tags=()):
            async with session_factory() as session:
                livestream = LivestreamModel(
                    user_id=owner_id,
                    title=title,
                    description="Some test description",
                    playlist_url="https://media.example.com/playlist.m3u8",
                    thumbnail_url="https://media.example.com/thumbnail.jpg",
                    start_at=1700000000,
                    end_at=1700003600,
                )
                session.add(livestream)
                await session.flush()
                for name in tags:
                    tag = TagModel(name=name)
                    session.add(tag)
                    await session.flush()
                    session.add(LivestreamTagModel(livestream_id=livestream.id, tag_id=tag.id))
                await session.commit()
                return livestream

        async def livecomment(self, user_id: int, livestream_id: int, comment: str, tip=0, created_at=1700000100):
            async with session_factory() as session:
                livecomment = LivecommentModel(
                    user_id=user_id,
                    livestream_id=livestream_id,
                    comment=comment,
                    tip=tip,
                    created_at=created_at,
                )
                session.add(livecomment)
                await session.commit()
                return livecomment

    return _Seed()


@pytest.fixture
def schema_factory():
    def _create(schema_type: str):
        user = UserSchema(
            id=1,
            name="streamer",
            display_name="Streamer",
            description="streamer description",
            theme=ThemeSchema(id=1, dark_mode=False),
            icon_hash="d9f8294e9d895f81ce62e73dc7d5dff862a4fa40bd4e0fecf53f7526a8edcac0",
        )
        livestream = LivestreamSchema(
            id=1,
            owner=user,
            title="Test livestream",
            description="Some test description",
            playlist_url="https://media.example.com/playlist.m3u8",
            thumbnail_url="https://media.example.com/thumbnail.jpg",
            tags=[TagSchema(id=1, name="chat")],
            start_at=1700000000,
            end_at=1700003600,
        )
        livecomment = LivecommentSchema(
            id=10,
            user=user,
            livestream=livestream,
            comment="hello",
            tip=100,
            created_at=1700000100,
        )
        if schema_type == "user":
            return user
        elif schema_type == "livestream":
            return livestream
        elif schema_type == "livecomment":
            return livecomment
        elif schema_type == "livecomment_report":
            return LivecommentReportSchema(
                id=5,
                reporter=user,
                livecomment=livecomment,
                created_at=1700000200,
            )
        else:
            return None
    return _create
