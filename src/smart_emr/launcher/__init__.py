from .emr import EMR, instance_of_emr, to_emr

__all__ = ["EMR", "instance_of_emr", "to_emr"]
