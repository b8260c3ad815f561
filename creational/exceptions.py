"""
creational-patterns 统一异常体系

本模块定义了项目中所有可能的错误场景对应的异常类型，
提供统一的异常处理机制和序列化支持。

异常层次结构:
CreationalError (基类)
├── ConfigError (配置错误)
├── SingletonError (单例错误)
│   ├── ConstructionError
│   ├── ReentrancyError
│   └── ConstructionTimeout
├── ProductError (产品创建错误)
│   ├── UnknownProductError
│   └── BuildError
├── DemoError (演示错误)
│   └── DemoNotFound
└── ReportError (报告错误)

使用示例:
    from creational.exceptions import (
        CreationalError, ConstructionError,
        wrap_exception, handle_exceptions
    )

    # 异常链
    try:
        settings = load_settings()
    except OSError as e:
        raise ConstructionError("配置加载失败", holder="settings", cause=e)

    # 使用装饰器
    @handle_exceptions(logger=logger, default_return=None)
    def render(transcripts):
        ...

    # 序列化
    try:
        ...
    except CreationalError as e:
        print(json.dumps(e.to_dict()))
"""

from __future__ import annotations

import functools
import logging
import traceback
from typing import Optional, Any, Dict, Callable, TypeVar, Union, Type

T = TypeVar('T')


# ============================================================================
# 基础异常类
# ============================================================================

class CreationalError(Exception):
    """
    creational-patterns 基础异常类

    所有自定义异常的父类，提供统一的异常格式和序列化支持。

    属性:
        message: 错误消息
        code: 错误代码，默认为异常类名
        details: 额外的错误详情字典
        cause: 原始异常（支持异常链）

    示例:
        >>> raise CreationalError("操作失败", code="OP_FAILED", details={"demo": "builder"})
        >>> try:
        ...     risky_operation()
        ... except Exception as e:
        ...     raise CreationalError("包装后的异常", cause=e)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        """
        初始化异常实例

        参数:
            message: 错误消息描述
            code: 错误代码，用于程序化处理。如果未指定，使用类名
            details: 附加的错误详情
            cause: 导致此异常的原始异常，用于异常链追踪
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """返回格式化的错误字符串"""
        parts = [f"[{self.code}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")
        return " | ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        将异常转换为字典格式，便于JSON序列化

        返回:
            包含错误信息的字典
        """
        result = {
            'error': self.code,
            'message': self.message,
            'details': self.details,
            'type': self.__class__.__name__,
        }
        if self.cause:
            result['cause'] = {
                'type': type(self.cause).__name__,
                'message': str(self.cause)
            }
        return result

    def get_traceback(self) -> str:
        """获取完整的异常堆栈追踪"""
        return ''.join(traceback.format_exception(type(self), self, self.__traceback__))


# ============================================================================
# 配置错误
# ============================================================================

class ConfigError(CreationalError):
    """
    配置错误

    当环境变量取值非法、参数无效时抛出。

    示例:
        >>> raise ConfigError("无效的配置项", details={"key": "CREATIONAL_WAIT_TIMEOUT", "value": "-1"})
    """
    pass


# ============================================================================
# 单例错误
# ============================================================================

class SingletonError(CreationalError):
    """
    单例错误基类

    属性:
        holder: 出错的单例持有者名称（可选）
    """

    def __init__(
        self,
        message: str,
        holder: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.holder = holder
        if holder:
            self.details['holder'] = holder


class ConstructionError(SingletonError):
    """
    构造失败

    初始化函数抛出异常时抛出，cause 指向原始异常。
    持有者状态会回退到 NOT_STARTED，之后的调用可以重新尝试构造。

    示例:
        >>> raise ConstructionError("实例构造失败", holder="Settings", cause=OSError("disk"))
    """
    pass


class ReentrancyError(SingletonError):
    """
    重入错误

    初始化函数在同一线程（或同一异步任务）内再次调用 get_instance() 时抛出，
    避免死锁。
    """
    pass


class ConstructionTimeout(SingletonError):
    """
    等待构造超时

    等待其他调用者完成构造超过 timeout 秒时抛出，不影响正在进行的构造。

    属性:
        timeout: 超时时间设置（秒）
    """

    def __init__(
        self,
        message: str,
        timeout: Optional[float] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.timeout = timeout
        if timeout is not None:
            self.details['timeout'] = timeout


# ============================================================================
# 产品创建错误
# ============================================================================

class ProductError(CreationalError):
    """产品创建错误基类"""
    pass


class UnknownProductError(ProductError):
    """
    未知产品类型

    简单工厂收到无法识别的产品类型时抛出。

    示例:
        >>> raise UnknownProductError("Invalid vehicle type: boat", details={"type": "boat"})
    """
    pass


class BuildError(ProductError):
    """
    构建错误

    生成器缺少必需部件时抛出。

    属性:
        missing: 缺失的部件列表
    """

    def __init__(
        self,
        message: str,
        missing: Optional[list] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.missing = list(missing or [])
        if self.missing:
            self.details['missing'] = self.missing


# ============================================================================
# 演示错误
# ============================================================================

class DemoError(CreationalError):
    """
    演示错误基类

    属性:
        demo: 演示名称
    """

    def __init__(
        self,
        message: str,
        demo: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.demo = demo
        if demo:
            self.details['demo'] = demo


class DemoNotFound(DemoError):
    """演示不存在"""
    pass


# ============================================================================
# 报告错误
# ============================================================================

class ReportError(CreationalError):
    """
    报告错误

    模板渲染失败、格式不支持、写入文件失败时抛出。

    属性:
        format: 报告格式
    """

    def __init__(
        self,
        message: str,
        format: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.format = format
        if format:
            self.details['format'] = format


# ============================================================================
# 辅助函数
# ============================================================================

def wrap_exception(
    exc: BaseException,
    wrapper_class: Type[CreationalError] = CreationalError,
    message: Optional[str] = None
) -> CreationalError:
    """
    将标准异常包装为自定义异常

    如果传入的异常已经是 CreationalError 类型，直接返回。
    否则创建一个新的包装异常。

    参数:
        exc: 原始异常
        wrapper_class: 包装使用的异常类，默认为 CreationalError
        message: 自定义错误消息，如果为None则使用原始异常的消息

    返回:
        CreationalError 类型的异常

    示例:
        >>> try:
        ...     risky_operation()
        ... except Exception as e:
        ...     raise wrap_exception(e, ReportError, "报告写入失败")
    """
    if isinstance(exc, CreationalError):
        return exc

    error_message = message or str(exc)
    return wrapper_class(
        error_message,
        cause=exc,
        details={'original_type': type(exc).__name__}
    )


def handle_exceptions(
    logger: Optional[logging.Logger] = None,
    default_return: Any = None,
    reraise: bool = False,
    error_mapping: Optional[Dict[Type[Exception], Type[CreationalError]]] = None
) -> Callable:
    """
    统一异常处理装饰器

    自动捕获函数中的异常，根据配置进行日志记录、异常转换或返回默认值。
    支持同步和异步函数。

    参数:
        logger: 日志记录器，用于记录异常信息
        default_return: 异常发生时的默认返回值
        reraise: 是否重新抛出异常（转换后的异常）
        error_mapping: 异常类型映射字典，如 {KeyError: DemoNotFound}

    返回:
        装饰器函数

    示例:
        >>> @handle_exceptions(logger=logger, default_return=[])
        ... def run_selected(names):
        ...     ...
    """
    import inspect

    default_mapping: Dict[Type[Exception], Type[CreationalError]] = {
        ValueError: ConfigError,
        LookupError: DemoNotFound,
        OSError: ReportError,
    }

    if error_mapping:
        default_mapping.update(error_mapping)

    def _convert(e: Exception) -> Union[CreationalError, None]:
        for exc_type, target_exc in default_mapping.items():
            if isinstance(e, exc_type):
                return wrap_exception(e, target_exc)
        return None

    def decorator(func: Callable[..., T]) -> Callable[..., Union[T, Any]]:
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Union[T, Any]:
            try:
                return func(*args, **kwargs)
            except CreationalError:
                if reraise:
                    raise
                if logger:
                    logger.exception("捕获到已知异常")
                return default_return
            except Exception as e:
                new_exc = _convert(e)
                if new_exc is not None:
                    if logger:
                        logger.warning(f"{type(new_exc).__name__}: {e}")
                    if reraise:
                        raise new_exc from e
                    return default_return

                if logger:
                    logger.exception(f"未预期的错误: {e}")
                if reraise:
                    raise wrap_exception(e) from e
                return default_return

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Union[T, Any]:
            try:
                return await func(*args, **kwargs)
            except CreationalError:
                if reraise:
                    raise
                if logger:
                    logger.exception("捕获到已知异常")
                return default_return
            except Exception as e:
                new_exc = _convert(e)
                if new_exc is not None:
                    if logger:
                        logger.warning(f"{type(new_exc).__name__}: {e}")
                    if reraise:
                        raise new_exc from e
                    return default_return

                if logger:
                    logger.exception(f"未预期的错误: {e}")
                if reraise:
                    raise wrap_exception(e) from e
                return default_return

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


# ============================================================================
# 导出列表
# ============================================================================

__all__ = [
    # 基类
    'CreationalError',

    # 配置错误
    'ConfigError',

    # 单例错误
    'SingletonError',
    'ConstructionError',
    'ReentrancyError',
    'ConstructionTimeout',

    # 产品错误
    'ProductError',
    'UnknownProductError',
    'BuildError',

    # 演示错误
    'DemoError',
    'DemoNotFound',

    # 报告错误
    'ReportError',

    # 辅助函数
    'wrap_exception',
    'handle_exceptions',
]
