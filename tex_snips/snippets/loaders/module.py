import re
import sys
from ast import PyCF_ALLOW_TOP_LEVEL_AWAIT
from contextlib import contextmanager
from importlib.util import module_from_spec, spec_from_loader
from inspect import CO_COROUTINE
from linecache import cache
from types import ModuleType
from typing import Any, Iterator
from uuid import uuid4

from pynvim_pp.logging import log

from ...consts import DEFAULT_EXPORT, DEFAULT_MODULE_PATH
from ...shared.types import Err, Ok, Result, SourceCode
from ..types import LoadError, NoDefaultExport


@contextmanager
def _transient(source: SourceCode) -> Iterator[ModuleType]:
    name = f"_tex_snips_{uuid4().hex}"
    # pathless loads may overlap, each gets its own traceback source
    filename = (
        str(source.path) if source.path else f"{DEFAULT_MODULE_PATH}#{name}"
    )
    spec = spec_from_loader(name, loader=None, origin=filename)
    assert spec
    module = module_from_spec(spec)
    module.__file__ = filename
    module.__dict__.update(re=re)

    lines = source.source_code.splitlines(keepends=True)
    entry = (len(source.source_code), None, lines, filename)
    prev = cache.get(filename)
    sys.modules[name] = module
    cache[filename] = entry
    try:
        yield module
    finally:
        sys.modules.pop(name, None)
        if cache.get(filename) is entry:
            if prev is None:
                cache.pop(filename, None)
            else:
                cache[filename] = prev


async def _exec(source: SourceCode) -> ModuleType:
    with _transient(source) as module:
        code = compile(
            source.source_code,
            module.__file__ or "",
            "exec",
            flags=PyCF_ALLOW_TOP_LEVEL_AWAIT,
            dont_inherit=True,
        )
        if code.co_flags & CO_COROUTINE:
            await eval(code, module.__dict__)
        else:
            exec(code, module.__dict__)
        return module


async def import_default(source: SourceCode) -> Result[Any, LoadError]:
    """
    Execute `source` as a throwaway module and fetch its `default` binding
    """

    try:
        module = await _exec(source)
    except Exception as e:
        path = source.path or DEFAULT_MODULE_PATH
        err = LoadError(f"Failed to load {path}: {type(e).__name__}: {e}")
        err.__cause__ = e
        return Err(err)
    else:
        if not hasattr(module, DEFAULT_EXPORT):
            return Err(NoDefaultExport("No default export provided for module"))
        else:
            return Ok(getattr(module, DEFAULT_EXPORT))


async def import_raw(source: SourceCode) -> Result[Any, LoadError]:
    """
    Snippet files may be full modules binding `default`, or a bare literal
    """

    loaded = await import_default(source)
    if isinstance(loaded, Err) and isinstance(loaded.error, NoDefaultExport):
        log.debug("%s", f"no default export, retrying as literal :: {source.path}")
        wrapped = f"{DEFAULT_EXPORT} = (\n{source.source_code}\n)\n"
        return await import_default(
            SourceCode(source_code=wrapped, path=source.path)
        )
    else:
        return loaded
