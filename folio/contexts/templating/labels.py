"""Field labels shared by the markdown formatter and the HTML templates."""

LABELS = {
    "basic_info": "基本信息",
    "gender": "性别",
    "age": "年龄",
    "experience": "工作年限",
    "phone": "电话",
    "call": "拨打",
    "wechat": "微信",
    "email": "邮箱",
    "send_email": "发送邮件",
    "links": "地址/链接",
    "education": "教育",
    "degree": "学历",
    "major": "专业",
    "gpa": "GPA",
    "rank": "排名",
    "course": "课程",
    "credit": "学分",
    "description": "项目描述",
    "tech_stack": "技术栈",
    "position": "岗位",
}

# Separator between a label and its value
LABEL_SEP = "："
