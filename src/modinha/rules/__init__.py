class RuleMeta(type):
    """
    Factory:  MyRule[params]  ➜  a *concrete* subclass that carries the params.

    The same rule with the same (hashable) params is built once, so schemas
    can be validated repeatedly without piling up classes.
    """
    _built: dict = {}

    def __getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)

        try:
            return RuleMeta._built[cls, params]
        except KeyError:
            pass
        except TypeError:  # unhashable params, e.g. an enum of dicts
            return cls._build(params)

        rule = RuleMeta._built[cls, params] = cls._build(params)
        return rule

    def _build(cls, params):
        name = f"{cls.__name__}_" + "_".join(map(str, params))
        return RuleMeta(name, (cls,), {"__rule_params__": params})

    # rules are used as classes, never as objects
    def __call__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a rule class and cannot be instantiated")


class Rule(metaclass=RuleMeta):
    """Abstract value rule – never check with plain Rule, only its subs."""
    __rule_params__: tuple = ()

    @classmethod
    def describe(cls) -> str:  # human-readable constraint
        raise NotImplementedError

    @classmethod
    def validate(cls, v) -> bool:
        raise NotImplementedError

    @classmethod
    def check(cls, path: str, v) -> str | None:
        """Message for the value at *path*, or ``None`` when it passes."""
        if cls.validate(v):
            return None
        return f'"{path}" {cls.describe()}'
