from dataclasses import dataclass
from typing import Any, Dict, List

import jsonschema
from flask_restx import fields
from jsonschema.exceptions import ValidationError

import schemas
from errors import DecodeError


def _validate(instance: Any, schema: dict, label: str) -> None:
    try:
        jsonschema.validate(instance=instance, schema=schema)
    except ValidationError as e:
        raise DecodeError(
            f"Response JSON does not match '{label}' schema: {e.message} "
            f"(instance path: {list(e.path)})"
        ) from e


@dataclass(frozen=True)
class Post:
    """
    One post as served by /posts.

    Built fresh from each decoded response body and never mutated. Field
    names follow Python style; to_json() maps them back to the camelCase
    keys used on the wire.
    """
    user_id: int
    id: int
    title: str
    body: str

    @classmethod
    def from_json(cls, obj: Any) -> "Post":
        _validate(obj, schemas.post, "Post")
        return cls(user_id=int(obj["userId"]), id=int(obj["id"]), title=obj["title"], body=obj["body"])

    @classmethod
    def list_from_json(cls, obj: Any) -> List["Post"]:
        _validate(obj, schemas.post_list, "Post list")
        return [cls.from_json(item) for item in obj]

    def to_json(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "id": self.id,
            "title": self.title,
            "body": self.body,
        }


class Models:
    def __init__(self, api):
        self.api = api

        self.post_model = api.model('Post', {
            'userId': fields.Integer(required=True, description='The id of the user who wrote the post'),
            'id': fields.Integer(required=True, description='The post ID'),
            'title': fields.String(required=True, description='The post title'),
            'body': fields.String(required=True, description='The post body'),
        })
