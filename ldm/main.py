import hydra
from omegaconf import OmegaConf
import wandb
from ldm.partition import Bipartition, largest_differencing_method
from ldm.utils.logging import progress_bar, time_logger, log_partition

@time_logger("partition")
def partition(size_list, step):
    return largest_differencing_method(
        (idx, size) for idx, size in enumerate(size_list)
    )


class Runner:

    def __init__(self, config):

        OmegaConf.resolve(config)
        self.config = config

        print(OmegaConf.to_yaml(config))
        if config.runner.use_wandb:
            wandb.init(
                project=config.runner.project,
                name=config.runner.experiment_name,
                config=OmegaConf.to_container(config)
            )
        else:
            wandb.log = lambda *args, **kwargs: None

    def run(self) -> list[Bipartition]:

        results = []
        for step, instance in enumerate(
            progress_bar(self.config.data.instances, desc="Partition"), 1
        ):
            size_list = list(instance.sizes)
            labels = instance.get("labels")
            labels = size_list if labels is None else list(labels)
            assert len(labels) == len(size_list), \
                f"{len(labels)} labels for {len(size_list)} sizes"

            result = partition(size_list, step)
            log_partition(result, size_list, step)
            results.append(Bipartition(
                [labels[idx] for idx in result.group_1],
                [labels[idx] for idx in result.group_2],
                result.difference
            ))
        return results


@hydra.main(config_path="config", config_name="ldm", version_base=None)
def main(config):

    runner = Runner(config)
    runner.run()

    if config.runner.use_wandb:
        wandb.finish()

if __name__ == "__main__":
    main()
