import threading


class Singleton(type):
    _instances = {}
    _lock = threading.Lock()  # guards first construction across threads

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset_instance(cls):
        with cls._lock:
            cls._instances.pop(cls, None)
