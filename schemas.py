post = {
    "type": "object",
    "required": ["userId", "id", "title", "body"],
    "properties": {
        "userId": {
            "type": "integer"
        },
        "id": {
            "type": "integer"
        },
        "title": {
            "type": "string"
        },
        "body": {
            "type": "string"
        },
    }
}


post_list = {
    "type": "array",
    "items": post
}
