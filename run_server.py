# 主程序执行文件
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from time_mcp.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
