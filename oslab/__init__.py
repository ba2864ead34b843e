"""Operating-systems lab exercises: processes, threads, IPC, scheduling, memory cost and image diffusion."""

__version__ = "0.1.0"