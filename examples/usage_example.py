"""
流程状态检查器使用示例
"""
import logging
from pathlib import Path

from process_inspector import ProcessStateInspector
from process_inspector.core import ProcessStateRenderer
from process_inspector.storage import SnapshotLoader


# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    """从快照文件打印流程实例状态"""
    snapshot = Path(__file__).parent / "signal_process.yaml"
    query_service = SnapshotLoader().load(snapshot)

    inspector = ProcessStateInspector(query_service)
    inspector.dump_process_state("pi-1")

    # 与历史控制台输出一致的布局：根执行也缩进4列
    legacy = ProcessStateInspector(query_service, renderer=ProcessStateRenderer(base_indent=4))
    legacy.dump_process_state("pi-1")


if __name__ == "__main__":
    main()
