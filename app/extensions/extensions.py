from flask_cors import CORS
from flask_marshmallow import Marshmallow


ma = Marshmallow()
cors = CORS()
