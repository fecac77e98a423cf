from .base import Base, BigIntId
from sqlalchemy import Column, BigInteger, String, Text, Boolean, ForeignKey


class User(Base):
    __tablename__ = 'users'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)
    display_name = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)


class Theme(Base):
    __tablename__ = 'themes'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False, index=True)
    dark_mode = Column(Boolean, nullable=False, default=False)


class Icon(Base):
    __tablename__ = 'icons'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False, index=True)
    icon_hash = Column(String(64), nullable=False)
