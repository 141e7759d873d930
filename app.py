from flask import Flask, request
from flask_restx import Api, Namespace, Resource

from load_data import load_posts
from models import Models


app = Flask(__name__)
# /posts and /posts/ both resolve without a redirect, like the public fixture
app.url_map.strict_slashes = False

api = Api(app, version='1.0', title='Posts API',
          description='Local replica of the JSONPlaceholder /posts resource')

models = Models(api)

posts_ns = Namespace("posts", description="Posts info")
api.add_namespace(posts_ns)

# In-memory data storage
posts = load_posts()

FILTERABLE_FIELDS = ["userId", "id", "title", "body"]


def filter_posts(items, args):
    """
    Keeps the posts whose fields match every known query argument.

    Values compare as strings. A repeated argument (?userId=1&userId=2)
    matches any of its values; unknown arguments are ignored.
    """
    result = items
    for field in FILTERABLE_FIELDS:
        wanted = args.getlist(field)
        if wanted:
            result = [post for post in result if str(post[field]) in wanted]
    return result


@posts_ns.route('/')
class PostList(Resource):
    @posts_ns.doc('list_posts')
    @posts_ns.marshal_list_with(models.post_model)
    def get(self):
        """List posts, optionally filtered by field"""
        return filter_posts(posts, request.args)


@posts_ns.route('/<int:post_id>')
@posts_ns.response(404, 'Post not found')
@posts_ns.param('post_id', 'The post identifier')
class PostItem(Resource):
    @posts_ns.doc('get_post')
    @posts_ns.marshal_with(models.post_model)
    def get(self, post_id):
        """Fetch a post by id"""
        post = next((post for post in posts if post["id"] == post_id), None)
        if post is not None:
            return post
        api.abort(404, f"Post with ID {post_id} not found")


if __name__ == '__main__':
    app.run(debug=True, port=5001)
