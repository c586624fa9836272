from .frame import config_from_frame, server_data_from_frame
from .server_data import config_from_server_data

__all__ = [
    "config_from_frame",
    "server_data_from_frame",
    "config_from_server_data",
]
