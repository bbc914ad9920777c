#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from caspian.data.models.product import ProductModel
from caspian.data.models.user import UserModel
from caspian.data.models.customer import CustomerModel
from caspian.data.models.cart import CartLineModel
from caspian.data.models.order import OrderModel
from caspian.data.models.order_detail import OrderDetailModel
from caspian.data.models.message import MessageFromModel, MessageToModel

__all__ = [
    "ProductModel",
    "UserModel",
    "CustomerModel",
    "CartLineModel",
    "OrderModel",
    "OrderDetailModel",
    "MessageFromModel",
    "MessageToModel",
]
