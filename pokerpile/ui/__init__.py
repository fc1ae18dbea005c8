"""用户界面层，只通过公开接口读取核心对象."""
