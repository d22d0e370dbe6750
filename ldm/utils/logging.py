import time
import inspect
import functools
from tqdm import tqdm
import wandb
from ldm.partition import Bipartition

def progress_bar(*args, **kwargs):
    return tqdm(*args, leave=False, **kwargs)

def time_logger(name):
    def decorator(func):
        sig = inspect.signature(func)
        param_names = list(sig.parameters.keys())
        assert "step" in param_names
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            step = kwargs["step"] if "step" in kwargs else args[param_names.index("step")]
            start = time.time()
            output = func(*args, **kwargs)
            wandb.log({
                f"timing/{name}": time.time() - start
            }, step=step)
            return output
        return wrapper
    return decorator

def log_partition(result: Bipartition, size_list, step):

    # groups of `result` hold indices into `size_list`
    metrics = {
        "difference": result.difference,
        "group_1/size": len(result.group_1),
        "group_2/size": len(result.group_2),
        "group_1/sum": sum(size_list[idx] for idx in result.group_1),
        "group_2/sum": sum(size_list[idx] for idx in result.group_2)
    }
    tqdm.write(f"Step {step}, " + ", ".join([
        f"{k}: {v:.3g}" if isinstance(v, float) else f"{k}: {v}"
        for k, v in metrics.items()
    ]))
    wandb.log(metrics, step=step)
    return metrics
