"""rqd - Benchmark ffmpeg encoders by output size and VMAF quality."""
