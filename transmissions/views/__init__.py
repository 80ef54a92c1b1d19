from .feed_view import *
from .search_view import *
from .handle_view import *
from .report_view import *
from .moderation_views import *
from .log_in_view import *
from .log_out_view import *
from .pages_view import *
from .api_views import *
