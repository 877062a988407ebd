# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-23
# Updated: 2026-10-16
# Description: types.py
# -----------------------------------------------------------------------------
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Fields are typed loosely: a present 'data' object is never rejected
# because one of its fields is null or of an unexpected type.


class ReadUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    tokens: Optional[Any] = None


class ReadData(BaseModel):
    # r.jina.ai adds fields over time (links, images, warning, ...); keep them
    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = None
    description: Optional[Any] = None
    url: Optional[Any] = None
    content: Optional[Any] = None
    links: Optional[Any] = None  # dict or list of [text, url] pairs
    usage: Annotated[Optional[Union[ReadUsage, Any]], Field(union_mode="left_to_right")] = None


class ReadResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Optional[Any] = None
    status: Optional[Any] = None
    data: ReadData
